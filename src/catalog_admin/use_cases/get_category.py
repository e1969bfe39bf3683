"""Get category by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from catalog_admin.domain.errors import NotFoundError
from catalog_admin.domain.value_objects import Uuid
from catalog_admin.ports.category_repository import CategoryRepository
from catalog_admin.use_cases.category_output import CategoryOutput


@dataclass(frozen=True, slots=True)
class GetCategoryRequest:
    """Request to get a category by ID."""

    id: str


class GetCategory:
    """
    Use case for retrieving a single category by ID.

    Responsibilities:
    - Validate id format (must be valid UUID)
    - Delegate to repository for data access
    - Raise NotFoundError if category doesn't exist
    """

    def __init__(self, category_repository: CategoryRepository) -> None:
        """
        Initialize use case with dependencies.

        Args:
            category_repository: Repository for category data access
        """
        self._repository = category_repository

    async def execute(self, request: GetCategoryRequest) -> CategoryOutput:
        """
        Execute the get category use case.

        Args:
            request: Request containing the category id

        Returns:
            CategoryOutput for the stored category

        Raises:
            InvalidUuidError: If id is not a valid UUID format
            NotFoundError: If no category has the given id
        """
        category_id = Uuid(request.id)
        category = await self._repository.find_by_id(category_id)

        if category is None:
            raise NotFoundError(category_id, self._repository.get_entity())

        return CategoryOutput.from_entity(category)
