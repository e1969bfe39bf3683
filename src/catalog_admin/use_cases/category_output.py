from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Generic, TypeVar

from catalog_admin.domain.category import Category
from catalog_admin.domain.search import SearchResult

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CategoryOutput:
    """Category as returned by every category use case."""

    id: str
    name: str
    description: str | None
    is_active: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, category: Category) -> CategoryOutput:
        return cls(
            id=category.category_id.id,
            name=category.name,
            description=category.description,
            is_active=category.is_active,
            created_at=category.created_at,
        )


@dataclass(frozen=True)
class PaginationOutput(Generic[T]):
    items: list[T]
    total: int
    current_page: int
    last_page: int
    per_page: int

    @classmethod
    def from_search_result(cls, result: SearchResult, items: list[T]) -> PaginationOutput[T]:
        return cls(
            items=items,
            total=result.total,
            current_page=result.current_page,
            last_page=result.last_page,
            per_page=result.per_page,
        )
