from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from catalog_admin.domain.errors import NotFoundError
from catalog_admin.domain.value_objects import Uuid
from catalog_admin.ports.category_repository import CategoryRepository
from catalog_admin.use_cases.category_output import CategoryOutput


class _Unset:
    """Marks a field the caller did not send (distinct from an explicit None)."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass(frozen=True, slots=True)
class UpdateCategoryRequest:
    """
    Partial update. Only fields that were provided are applied:

    - name: applied when non-empty
    - description: applied when not UNSET (None clears it)
    - is_active: True activates, False deactivates, None leaves it alone
    """

    id: str
    name: str | None = None
    description: str | None = UNSET
    is_active: bool | None = None


class UpdateCategory:
    """
    Use case for partially updating a category.

    Responsibilities:
    - Load the category (NotFoundError when missing)
    - Apply only the provided fields through entity commands
    - Persist with repository.update
    """

    def __init__(self, category_repository: CategoryRepository) -> None:
        self._repository = category_repository

    async def execute(self, request: UpdateCategoryRequest) -> CategoryOutput:
        """
        Raises:
            InvalidUuidError: If id is not a valid UUID format
            NotFoundError: If no category has the given id
            EntityValidationError: If the new values break an invariant
        """
        category_id = Uuid(request.id)
        stored = await self._repository.find_by_id(category_id)

        if stored is None:
            raise NotFoundError(category_id, self._repository.get_entity())

        # Commands run on a copy: the stored entity only changes through update()
        category = replace(stored)

        if request.name:
            category.change_name(request.name)

        if request.description is not UNSET:
            category.change_description(request.description)

        if request.is_active is True:
            category.activate()
        elif request.is_active is False:
            category.deactivate()

        await self._repository.update(category)

        return CategoryOutput.from_entity(category)
