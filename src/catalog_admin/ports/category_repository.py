from __future__ import annotations

from abc import abstractmethod

from catalog_admin.domain.category import Category
from catalog_admin.domain.search import SearchParams, SearchResult
from catalog_admin.domain.value_objects import Uuid
from catalog_admin.ports.repository import SearchableRepository

# Categories are filtered by a free-text match on name
CategoryFilter = str
CategorySearchParams = SearchParams
CategorySearchResult = SearchResult[Category]


class CategoryRepository(SearchableRepository[Category, Uuid]):
    """
    Port for category persistence.

    Search semantics every implementation honors:
        - filter: case-insensitive substring match on name
        - sortable fields: name, created_at
        - no (or unsupported) sort requested: created_at descending
    """

    sortable_fields = ("name", "created_at")

    @abstractmethod
    async def search(self, params: CategorySearchParams) -> CategorySearchResult: ...
