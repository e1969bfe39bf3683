"""
Dependency injection for FastAPI routes.

Key principle: Database sessions are per-request, not cached. The in-memory
backend is the one exception: its store must outlive a single request, so
one instance is shared by the whole process.
"""

from __future__ import annotations

from typing import AsyncIterator

from fastapi import Depends

from catalog_admin.adapters.in_memory_category_repository import InMemoryCategoryRepository
from catalog_admin.adapters.sqlalchemy_category_repository import SqlAlchemyCategoryRepository
from catalog_admin.infra.db.config import repository_backend
from catalog_admin.infra.db.session import get_session
from catalog_admin.ports.category_repository import CategoryRepository
from catalog_admin.use_cases.create_category import CreateCategory
from catalog_admin.use_cases.delete_category import DeleteCategory
from catalog_admin.use_cases.get_category import GetCategory
from catalog_admin.use_cases.list_categories import ListCategories
from catalog_admin.use_cases.update_category import UpdateCategory

_in_memory_repository: InMemoryCategoryRepository | None = None


def get_in_memory_repository() -> InMemoryCategoryRepository:
    """Process-wide in-memory repository (lazy initialization)."""
    global _in_memory_repository
    if _in_memory_repository is None:
        _in_memory_repository = InMemoryCategoryRepository()
    return _in_memory_repository


async def get_category_repository() -> AsyncIterator[CategoryRepository]:
    """
    Provides the category repository for a single request.

    With the SQLAlchemy backend (default) FastAPI will:
    1. Open a session when the request starts
    2. Inject a repository bound to that session
    3. Commit/rollback and close the session when the request ends

    Set CATALOG_REPOSITORY=memory to use the in-memory backend instead.
    """
    if repository_backend() == "memory":
        yield get_in_memory_repository()
        return

    async with get_session() as session:
        yield SqlAlchemyCategoryRepository(session=session)


def get_create_category_use_case(
    repository: CategoryRepository = Depends(get_category_repository),
) -> CreateCategory:
    return CreateCategory(category_repository=repository)


def get_get_category_use_case(
    repository: CategoryRepository = Depends(get_category_repository),
) -> GetCategory:
    return GetCategory(category_repository=repository)


def get_update_category_use_case(
    repository: CategoryRepository = Depends(get_category_repository),
) -> UpdateCategory:
    return UpdateCategory(category_repository=repository)


def get_delete_category_use_case(
    repository: CategoryRepository = Depends(get_category_repository),
) -> DeleteCategory:
    return DeleteCategory(category_repository=repository)


def get_list_categories_use_case(
    repository: CategoryRepository = Depends(get_category_repository),
) -> ListCategories:
    """
    Factory function that returns a configured ListCategories use case.

    Called per-request, so each request gets a fresh use case bound to
    its own repository (and session).
    """
    return ListCategories(category_repository=repository)
