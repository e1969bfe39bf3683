from __future__ import annotations

from catalog_admin.entrypoints.http.dtos.category import (
    CategoriesSearchQueryDTO,
    CategoryListResponseDTO,
    CategoryResponseDTO,
    CreateCategoryDTO,
    UpdateCategoryDTO,
)
from catalog_admin.use_cases.category_output import CategoryOutput, PaginationOutput
from catalog_admin.use_cases.create_category import CreateCategoryRequest
from catalog_admin.use_cases.list_categories import ListCategoriesRequest
from catalog_admin.use_cases.update_category import UNSET, UpdateCategoryRequest


class CategoryMapper:
    """Maps between REST DTOs and use case requests/outputs for categories."""

    @staticmethod
    def to_create_request(dto: CreateCategoryDTO) -> CreateCategoryRequest:
        return CreateCategoryRequest(
            name=dto.name,
            description=dto.description,
            is_active=dto.is_active,
        )

    @staticmethod
    def to_update_request(category_id: str, dto: UpdateCategoryDTO) -> UpdateCategoryRequest:
        """
        Builds a partial update request.

        description is only forwarded when the client actually sent it, so
        an explicit null clears it while an omitted field keeps it.
        """
        return UpdateCategoryRequest(
            id=category_id,
            name=dto.name,
            description=dto.description if "description" in dto.model_fields_set else UNSET,
            is_active=dto.is_active,
        )

    @staticmethod
    def to_list_request(dto: CategoriesSearchQueryDTO) -> ListCategoriesRequest:
        # Raw values on purpose: the domain normalizes them
        return ListCategoriesRequest(
            page=dto.page,
            per_page=dto.per_page,
            sort=dto.sort,
            sort_dir=dto.sort_dir,
            filter=dto.filter,
        )

    @staticmethod
    def to_response(output: CategoryOutput) -> CategoryResponseDTO:
        return CategoryResponseDTO(
            id=output.id,
            name=output.name,
            description=output.description,
            is_active=output.is_active,
            created_at=output.created_at,
        )

    @staticmethod
    def to_list_response(result: PaginationOutput[CategoryOutput]) -> CategoryListResponseDTO:
        return CategoryListResponseDTO(
            items=[CategoryMapper.to_response(item) for item in result.items],
            total=result.total,
            current_page=result.current_page,
            last_page=result.last_page,
            per_page=result.per_page,
        )
