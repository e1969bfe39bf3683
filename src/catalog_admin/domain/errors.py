"""Domain error classes.

Protocol-agnostic errors that represent business failures.
These errors are translated to appropriate formats (HTTP, CLI) by protocol adapters.
"""

from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains business error information that
    can be translated to HTTP or any other transport format.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Examples:
        - Malformed entity identifier
        - Entity invariant violations (blank name, name too long)

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "name", "message": "Must not be blank"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class EntityValidationError(ValidationError):
    """Entity invariants were violated.

    Carries a mapping of field name to the list of messages for that field.
    """

    def __init__(self, field_errors: dict[str, list[str]], message: str | None = None) -> None:
        self.field_errors = field_errors
        errors = [
            {"field": field, "message": msg, "code": "INVALID_FIELD"}
            for field, messages in field_errors.items()
            for msg in messages
        ]
        super().__init__(message or "Entity validation failed", errors=errors)

    def count(self) -> int:
        """Number of fields that failed validation."""
        return len(self.field_errors)


class NotFoundError(DomainError):
    """Resource not found.

    Raised by identity-keyed mutations (update, delete) and by use cases that
    require a record to exist. A repository lookup that simply finds nothing
    returns None instead.

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, identifier: Any, entity: type | str, **context: Any) -> None:
        """Create a not found error.

        Args:
            identifier: Identifier that was looked up (value object or raw value)
            entity: Entity class (or its name) that was being looked for
            **context: Additional context
        """
        self.identifier = identifier
        self.entity = entity
        resource = entity if isinstance(entity, str) else entity.__name__

        message = f"{resource} with identifier '{identifier}' not found"

        super().__init__(message, resource=resource, identifier=str(identifier), **context)
