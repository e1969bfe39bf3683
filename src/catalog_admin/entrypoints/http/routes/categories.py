from fastapi import APIRouter, Depends, Response, status

from catalog_admin.entrypoints.http.dependencies import (
    get_create_category_use_case,
    get_delete_category_use_case,
    get_get_category_use_case,
    get_list_categories_use_case,
    get_update_category_use_case,
)
from catalog_admin.entrypoints.http.dtos.category import (
    CategoriesSearchQueryDTO,
    CategoryListResponseDTO,
    CategoryResponseDTO,
    CreateCategoryDTO,
    UpdateCategoryDTO,
)
from catalog_admin.entrypoints.http.error_responses import ErrorResponse
from catalog_admin.entrypoints.http.mappers.category_mapper import CategoryMapper
from catalog_admin.use_cases.create_category import CreateCategory
from catalog_admin.use_cases.delete_category import DeleteCategory, DeleteCategoryRequest
from catalog_admin.use_cases.get_category import GetCategory, GetCategoryRequest
from catalog_admin.use_cases.list_categories import ListCategories
from catalog_admin.use_cases.update_category import UpdateCategory

router = APIRouter(tags=["Categories"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Category not found"}}
_INVALID = {422: {"model": ErrorResponse, "description": "Validation error"}}


@router.get(
    "/categories",
    response_model=CategoryListResponseDTO,
    summary="Search categories",
    description="""
    List categories with optional filter, sort and pagination.

    ## Filter
    - Case-insensitive substring match on name

    ## Sort
    - Fields: name, created_at
    - Without a (valid) sort field, newest categories come first

    ## Pagination
    - Default page: 1, default per_page: 15
    - Malformed values fall back to the defaults; they never fail the request

    ## Example
    ```
    GET /v1/categories?filter=mov&sort=name&sort_dir=desc&page=1&per_page=10
    ```
    """,
)
async def list_categories(
    query: CategoriesSearchQueryDTO = Depends(),
    use_case: ListCategories = Depends(get_list_categories_use_case),
) -> CategoryListResponseDTO:
    """Search categories endpoint following parse → execute → map → return pattern."""
    request = CategoryMapper.to_list_request(query)

    result = await use_case.execute(request)

    return CategoryMapper.to_list_response(result)


@router.post(
    "/categories",
    response_model=CategoryResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a category",
    responses=_INVALID,
)
async def create_category(
    body: CreateCategoryDTO,
    use_case: CreateCategory = Depends(get_create_category_use_case),
) -> CategoryResponseDTO:
    output = await use_case.execute(CategoryMapper.to_create_request(body))
    return CategoryMapper.to_response(output)


@router.get(
    "/categories/{category_id}",
    response_model=CategoryResponseDTO,
    summary="Get a category",
    responses={**_NOT_FOUND, **_INVALID},
)
async def get_category(
    category_id: str,
    use_case: GetCategory = Depends(get_get_category_use_case),
) -> CategoryResponseDTO:
    output = await use_case.execute(GetCategoryRequest(id=category_id))
    return CategoryMapper.to_response(output)


@router.patch(
    "/categories/{category_id}",
    response_model=CategoryResponseDTO,
    summary="Partially update a category",
    responses={**_NOT_FOUND, **_INVALID},
)
async def update_category(
    category_id: str,
    body: UpdateCategoryDTO,
    use_case: UpdateCategory = Depends(get_update_category_use_case),
) -> CategoryResponseDTO:
    output = await use_case.execute(CategoryMapper.to_update_request(category_id, body))
    return CategoryMapper.to_response(output)


@router.delete(
    "/categories/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a category",
    responses={**_NOT_FOUND, **_INVALID},
)
async def delete_category(
    category_id: str,
    use_case: DeleteCategory = Depends(get_delete_category_use_case),
) -> Response:
    await use_case.execute(DeleteCategoryRequest(id=category_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
