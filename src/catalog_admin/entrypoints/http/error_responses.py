"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "name",
                "message": "name should not be empty",
                "code": "INVALID_FIELD",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Category with identifier '...' not found",
                "code": "NOT_FOUND",
                "resource": "Category",
                "identifier": "..."
            }

        Validation error with field details:
            {
                "detail": "Entity validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "name", "message": "name should not be empty", "code": "INVALID_FIELD"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None
    resource: str | None = None
    identifier: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "detail": "Category with identifier "
                    "'550e8400-e29b-41d4-a716-446655440000' not found",
                    "code": "NOT_FOUND",
                    "resource": "Category",
                    "identifier": "550e8400-e29b-41d4-a716-446655440000",
                },
                {"detail": "Id must be a valid UUID", "code": "VALIDATION_ERROR"},
                {
                    "detail": "Entity validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "name",
                            "message": "name should not be empty",
                            "code": "INVALID_FIELD",
                        }
                    ],
                },
            ]
        }
    )
