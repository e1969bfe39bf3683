"""SQLAlchemy implementation of CategoryRepository."""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from datetime import timezone
from typing import TYPE_CHECKING

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_admin.domain.category import Category
from catalog_admin.domain.errors import NotFoundError
from catalog_admin.domain.search import SortDirection
from catalog_admin.domain.value_objects import Uuid
from catalog_admin.infra.db.models.category import CategoryRow
from catalog_admin.ports.category_repository import (
    CategoryRepository,
    CategorySearchParams,
    CategorySearchResult,
)

if TYPE_CHECKING:
    from sqlalchemy.sql import Select

# OFFSET/LIMIT are bound as SQL integers; larger values cannot be sent
MAX_SQL_INT = 2**31 - 1


class SqlAlchemyCategoryRepository(CategoryRepository):
    """
    SQLAlchemy (async) implementation of CategoryRepository.

    - Applies the name filter with a case-insensitive LIKE
    - Orders by an allowed field, otherwise created_at descending
    - Returns total via COUNT(*) over the filtered query
    - Converts CategoryRow (infrastructure) to Category (domain)

    Writes are flushed, not committed: the session owner decides when the
    transaction ends.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session for database operations
        """
        self._session = session

    async def insert(self, entity: Category) -> None:
        self._session.add(self._to_row(entity))
        await self._session.flush()

    async def bulk_insert(self, entities: Sequence[Category]) -> None:
        self._session.add_all([self._to_row(entity) for entity in entities])
        await self._session.flush()

    async def update(self, entity: Category) -> None:
        row = await self._get(entity.category_id)

        if row is None:
            raise NotFoundError(entity.category_id, self.get_entity())

        row.name = entity.name
        row.description = entity.description
        row.is_active = entity.is_active
        row.created_at = entity.created_at
        await self._session.flush()

    async def delete(self, entity_id: Uuid) -> None:
        row = await self._get(entity_id)

        if row is None:
            raise NotFoundError(entity_id, self.get_entity())

        await self._session.delete(row)
        await self._session.flush()

    async def find_by_id(self, entity_id: Uuid) -> Category | None:
        row = await self._get(entity_id)
        return self._to_domain(row) if row else None

    async def find_all(self) -> list[Category]:
        rows = (await self._session.execute(select(CategoryRow))).scalars().all()
        return [self._to_domain(row) for row in rows]

    def get_entity(self) -> type[Category]:
        return Category

    async def search(self, params: CategorySearchParams) -> CategorySearchResult:
        """
        Search categories with filter, sort and paging.

        Executes two queries:
        1. COUNT(*) to get total matching categories (before paging)
        2. SELECT with ORDER BY / OFFSET / LIMIT for the requested page

        Pages beyond what OFFSET can address come back empty.
        """
        query = self._build_query(params.filter)

        count_query = select(func.count()).select_from(query.subquery())
        total = (await self._session.execute(count_query)).scalar() or 0

        offset = (params.page - 1) * params.per_page
        rows: Sequence[CategoryRow] = []

        # A page starting past MAX_SQL_INT is empty, no query needed
        if offset <= MAX_SQL_INT:
            query = self._apply_order(query, params.sort, params.sort_dir)
            query = query.offset(offset).limit(min(params.per_page, MAX_SQL_INT))
            rows = (await self._session.execute(query)).scalars().all()

        return CategorySearchResult(
            items=[self._to_domain(row) for row in rows],
            total=total,
            current_page=params.page,
            per_page=params.per_page,
        )

    async def _get(self, entity_id: Uuid) -> CategoryRow | None:
        return await self._session.get(CategoryRow, uuid.UUID(entity_id.id))

    def _build_query(self, filter: str | None) -> Select[tuple[CategoryRow]]:
        query = select(CategoryRow)

        if filter is not None:
            query = query.where(CategoryRow.name.icontains(filter, autoescape=True))

        return query

    def _apply_order(
        self,
        query: Select[tuple[CategoryRow]],
        sort: str | None,
        sort_dir: SortDirection | None,
    ) -> Select[tuple[CategoryRow]]:
        if sort is None or sort not in self.sortable_fields:
            return query.order_by(CategoryRow.created_at.desc())

        column = getattr(CategoryRow, sort)
        return query.order_by(column.desc() if sort_dir == SortDirection.DESC else column.asc())

    def _to_row(self, entity: Category) -> CategoryRow:
        return CategoryRow(
            category_id=uuid.UUID(entity.category_id.id),
            name=entity.name,
            description=entity.description,
            is_active=entity.is_active,
            created_at=entity.created_at,
        )

    def _to_domain(self, row: CategoryRow) -> Category:
        created_at = row.created_at
        if created_at.tzinfo is None:  # SQLite drops the offset
            created_at = created_at.replace(tzinfo=timezone.utc)

        return Category(
            category_id=Uuid(str(row.category_id)),
            name=row.name,
            description=row.description,
            is_active=row.is_active,
            created_at=created_at,
        )
