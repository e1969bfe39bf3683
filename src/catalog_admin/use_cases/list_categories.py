from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from catalog_admin.domain.search import SearchParams
from catalog_admin.ports.category_repository import CategoryRepository
from catalog_admin.use_cases.category_output import CategoryOutput, PaginationOutput


@dataclass(frozen=True, slots=True)
class ListCategoriesRequest:
    """
    Raw search input. Values may be anything (typically query strings);
    they are normalized, never rejected.
    """

    page: Any = None
    per_page: Any = None
    sort: Any = None
    sort_dir: Any = None
    filter: Any = None


ListCategoriesResponse = PaginationOutput[CategoryOutput]


class ListCategories:
    """
    Category search with filter, sort and pagination.

    Malformed pagination input falls back to defaults (page 1, 15 per page)
    instead of failing the request. Filtering and ordering rules live in the
    repository adapter.
    """

    def __init__(self, category_repository: CategoryRepository) -> None:
        self._repository = category_repository

    async def execute(self, request: ListCategoriesRequest) -> ListCategoriesResponse:
        params = SearchParams(
            page=request.page,
            per_page=request.per_page,
            sort=request.sort,
            sort_dir=request.sort_dir,
            filter=request.filter,
        )

        result = await self._repository.search(params)

        return PaginationOutput.from_search_result(
            result,
            items=[CategoryOutput.from_entity(category) for category in result.items],
        )
