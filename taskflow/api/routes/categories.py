"""Category Routes — REST CRUD for categories.

Invariants:
    - GET /api/categories returns every category ordered by name
    - Deleting a category leaves referencing tasks/appointments in place
"""

from fastapi import APIRouter, Depends, status

from taskflow.api.dependencies import get_category_store
from taskflow.core.domain_types import CategoryId
from taskflow.core.errors import ResourceNotFoundError
from taskflow.core.repository_protocols import CategoryRepository
from taskflow.schemas.category import (
    CategoryCreate, CategoryResponse, CategoryUpdate,
)

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    store: CategoryRepository = Depends(get_category_store),
):
    categories = await store.list()
    return [CategoryResponse.model_validate(c) for c in categories]


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: int,
    store: CategoryRepository = Depends(get_category_store),
):
    category = await store.get(CategoryId(category_id))
    if category is None:
        raise ResourceNotFoundError("Category", category_id)
    return CategoryResponse.model_validate(category)


@router.post(
    "", response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_category(
    body: CategoryCreate,
    store: CategoryRepository = Depends(get_category_store),
):
    category = await store.create(body)
    return CategoryResponse.model_validate(category)


@router.patch("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int,
    body: CategoryUpdate,
    store: CategoryRepository = Depends(get_category_store),
):
    category = await store.update(CategoryId(category_id), body)
    if category is None:
        raise ResourceNotFoundError("Category", category_id)
    return CategoryResponse.model_validate(category)


@router.delete("/{category_id}")
async def delete_category(
    category_id: int,
    store: CategoryRepository = Depends(get_category_store),
):
    if not await store.delete(CategoryId(category_id)):
        raise ResourceNotFoundError("Category", category_id)
    return {"success": True}
