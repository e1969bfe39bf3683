from __future__ import annotations

from dataclasses import dataclass

from catalog_admin.domain.value_objects import Uuid
from catalog_admin.ports.category_repository import CategoryRepository


@dataclass(frozen=True, slots=True)
class DeleteCategoryRequest:
    id: str


class DeleteCategory:
    def __init__(self, category_repository: CategoryRepository) -> None:
        self._repository = category_repository

    async def execute(self, request: DeleteCategoryRequest) -> None:
        """
        Raises:
            InvalidUuidError: If id is not a valid UUID format
            NotFoundError: If no category has the given id
        """
        await self._repository.delete(Uuid(request.id))
