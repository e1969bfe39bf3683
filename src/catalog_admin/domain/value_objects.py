from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from catalog_admin.domain.errors import ValidationError


class InvalidUuidError(ValidationError):
    """Raised when an identifier is not a valid UUID."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "Id must be a valid UUID")


@dataclass(frozen=True)
class ValueObject:
    """
    Base for immutable value types.

    Subclasses are frozen dataclasses, so equality and hashing are structural:
    two instances with the same field values are equal no matter where they
    were created.
    """

    def __str__(self) -> str:
        return repr(self)


@dataclass(frozen=True)
class Uuid(ValueObject):
    """Entity identifier. A random v4 UUID is generated when none is given."""

    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self) -> None:
        try:
            canonical = str(uuid.UUID(self.id))
        except (TypeError, ValueError, AttributeError):
            raise InvalidUuidError() from None

        # Store the canonical lowercase form so equality stays structural
        object.__setattr__(self, "id", canonical)

    def __str__(self) -> str:
        return self.id
