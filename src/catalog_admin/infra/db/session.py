from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from catalog_admin.infra.db.config import database_url

logger = logging.getLogger(__name__)

# Lazy initialization - only create engine/session when needed
_engine: AsyncEngine | None = None
_session_local: async_sessionmaker[AsyncSession] | None = None


def get_engine() -> AsyncEngine:
    """
    Get or create the async database engine (lazy initialization).

    Connection Pool Configuration:
    - pool_size: Number of connections to keep open (base pool)
    - max_overflow: Additional connections allowed beyond pool_size
    - pool_pre_ping: Verify connection health before use
    - pool_recycle: Recycle connections after N seconds (prevent stale connections)
    """
    global _engine
    if _engine is None:
        _engine = create_async_engine(
            database_url(),
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
    return _engine


def get_session_local() -> async_sessionmaker[AsyncSession]:
    """Get or create the session factory (lazy initialization)."""
    global _session_local
    if _session_local is None:
        _session_local = async_sessionmaker(
            bind=get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _session_local


@asynccontextmanager
async def get_session() -> AsyncIterator[AsyncSession]:
    """Get a database session with automatic commit/rollback."""
    session = get_session_local()()

    try:
        yield session
        await session.commit()
    except Exception:
        logger.warning("Rolling back database session after error", exc_info=True)
        await session.rollback()
        raise
    finally:
        await session.close()
