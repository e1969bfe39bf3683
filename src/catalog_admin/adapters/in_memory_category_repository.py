from __future__ import annotations

from collections.abc import Iterable

from catalog_admin.adapters.in_memory_repository import InMemorySearchableRepository
from catalog_admin.domain.category import Category
from catalog_admin.domain.search import SortDirection
from catalog_admin.domain.value_objects import Uuid
from catalog_admin.ports.category_repository import CategoryRepository


def category_name_matches(category: Category, filter: str) -> bool:
    """Case-insensitive substring match on the category name."""
    return filter.lower() in category.name.lower()


class InMemoryCategoryRepository(InMemorySearchableRepository[Category, Uuid], CategoryRepository):
    """
    Category repository backed by a list.

    - Filters by case-insensitive substring on name
    - Sorts by name or created_at
    - Newest first (created_at desc) when no usable sort is requested
    """

    sortable_fields = ("name", "created_at")
    default_sort = ("created_at", SortDirection.DESC)

    def __init__(self, items: Iterable[Category] | None = None) -> None:
        super().__init__(items, filter_predicate=category_name_matches)

    def get_entity(self) -> type[Category]:
        return Category
