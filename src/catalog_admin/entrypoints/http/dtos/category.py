from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CategoryResponseDTO(BaseModel):
    id: str
    name: str
    description: str | None
    is_active: bool
    created_at: datetime


class CreateCategoryDTO(BaseModel):
    """Body for creating a category. Entity invariants are checked by the domain."""

    name: str = Field(description="Category name", examples=["Movie"])
    description: str | None = Field(
        default=None,
        description="Optional free-text description",
        examples=["Feature films"],
    )
    is_active: bool = Field(default=True, description="Whether the category is active")


class UpdateCategoryDTO(BaseModel):
    """Body for a partial update. Omitted fields are left unchanged."""

    name: str | None = Field(default=None, examples=["Documentary"])
    description: str | None = Field(
        default=None,
        description="Send null to clear the description; omit to keep it",
    )
    is_active: bool | None = None


class CategoriesSearchQueryDTO(BaseModel):
    """
    Query parameters for listing categories.

    All values are taken as raw strings: malformed pagination or sort input
    falls back to defaults instead of failing the request.
    """

    page: str | None = Field(default=None, description="Page number (default 1)", examples=["1"])
    per_page: str | None = Field(
        default=None, description="Items per page (default 15)", examples=["15"]
    )
    sort: str | None = Field(
        default=None,
        description="Sort field: name or created_at (default: newest first)",
        examples=["name"],
    )
    sort_dir: str | None = Field(default=None, description="asc or desc", examples=["asc"])
    filter: str | None = Field(
        default=None,
        description="Case-insensitive substring match on name",
        examples=["mov"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "page": "1",
                "per_page": "15",
                "sort": "name",
                "sort_dir": "asc",
                "filter": "mov",
            }
        }
    )


class CategoryListResponseDTO(BaseModel):
    items: list[CategoryResponseDTO]
    total: int
    current_page: int
    last_page: int
    per_page: int
