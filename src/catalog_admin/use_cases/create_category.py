from __future__ import annotations

from dataclasses import dataclass

from catalog_admin.domain.category import Category
from catalog_admin.ports.category_repository import CategoryRepository
from catalog_admin.use_cases.category_output import CategoryOutput


@dataclass(frozen=True, slots=True)
class CreateCategoryRequest:
    name: str
    description: str | None = None
    is_active: bool = True


class CreateCategory:
    """
    Use case for creating a category.

    Responsibilities:
    - Build a validated Category entity
    - Persist it through the repository
    """

    def __init__(self, category_repository: CategoryRepository) -> None:
        self._repository = category_repository

    async def execute(self, request: CreateCategoryRequest) -> CategoryOutput:
        """
        Raises:
            EntityValidationError: If the category data breaks an invariant
        """
        category = Category.create(
            name=request.name,
            description=request.description,
            is_active=request.is_active,
        )

        await self._repository.insert(category)

        return CategoryOutput.from_entity(category)
