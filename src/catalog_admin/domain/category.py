from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from catalog_admin.domain.entity import Entity
from catalog_admin.domain.errors import EntityValidationError
from catalog_admin.domain.value_objects import Uuid

NAME_MAX_LENGTH = 255


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Category(Entity):
    """
    Category aggregate.

    The plain constructor does not validate (it is also used to rehydrate
    stored rows). Use Category.create() for new categories; every command
    that changes a validated field re-validates.
    """

    name: str
    category_id: Uuid = field(default_factory=Uuid)
    description: str | None = None
    is_active: bool = True
    created_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if self.category_id is None:
            self.category_id = Uuid()
        if self.created_at is None:
            self.created_at = _utcnow()

    @classmethod
    def create(
        cls,
        name: str,
        description: str | None = None,
        is_active: bool = True,
    ) -> Category:
        category = cls(name=name, description=description, is_active=is_active)
        category.validate()
        return category

    @property
    def entity_id(self) -> Uuid:
        return self.category_id

    def change_name(self, name: str) -> None:
        self._change("name", name)

    def change_description(self, description: str | None) -> None:
        self._change("description", description)

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False

    def _change(self, attribute: str, value: Any) -> None:
        # An invalid value is never left on the entity
        previous = getattr(self, attribute)
        setattr(self, attribute, value)
        try:
            self.validate()
        except EntityValidationError:
            setattr(self, attribute, previous)
            raise

    def validate(self) -> None:
        """
        Check category invariants.

        Raises:
            EntityValidationError: With every failing field and its messages
        """
        errors: dict[str, list[str]] = {}

        if not isinstance(self.name, str) or not self.name.strip():
            errors.setdefault("name", []).append("name should not be empty")
        elif len(self.name) > NAME_MAX_LENGTH:
            errors.setdefault("name", []).append(
                f"name must be shorter than or equal to {NAME_MAX_LENGTH} characters"
            )

        if self.description is not None and not isinstance(self.description, str):
            errors.setdefault("description", []).append("description must be a string")

        if not isinstance(self.is_active, bool):
            errors.setdefault("is_active", []).append("is_active must be a boolean value")

        if errors:
            raise EntityValidationError(errors)

    def to_dict(self) -> dict[str, Any]:
        return {
            "category_id": self.category_id.id,
            "name": self.name,
            "description": self.description,
            "is_active": self.is_active,
            "created_at": self.created_at,
        }
