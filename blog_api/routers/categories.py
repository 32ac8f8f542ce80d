"""Category routes."""

from fastapi import APIRouter, Body, Depends, Response, status

from blog_api.dependencies.auth import get_current_identity
from blog_api.dependencies.services import get_category_service
from blog_api.policies import Identity
from blog_api.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from blog_api.schemas.common import Envelope
from blog_api.services.category_service import CategoryService

router = APIRouter()


@router.post(
    "", response_model=Envelope[list[CategoryResponse]], status_code=status.HTTP_201_CREATED
)
async def create_categories(
    categories: CategoryCreate | list[CategoryCreate] = Body(...),
    identity: Identity = Depends(get_current_identity),
    category_service: CategoryService = Depends(get_category_service),
):
    """Create one category, or several from a JSON array."""
    if isinstance(categories, list):
        payload = [item.model_dump(exclude_none=True) for item in categories]
    else:
        payload = categories.model_dump(exclude_none=True)

    created = await category_service.create_categories(payload, identity)
    message = "Categories created successfully" if len(created) > 1 else "Category created successfully"
    return Envelope(
        message=message,
        data=[CategoryResponse.model_validate(category) for category in created],
    )


@router.get("", response_model=Envelope[list[CategoryResponse]])
async def list_categories(category_service: CategoryService = Depends(get_category_service)):
    """List categories."""
    categories = await category_service.list_categories()
    return Envelope(
        message="Categories fetched successfully",
        data=[CategoryResponse.model_validate(category) for category in categories],
    )


@router.get("/{category_id}", response_model=Envelope[CategoryResponse])
async def get_category(
    category_id: str,
    category_service: CategoryService = Depends(get_category_service),
):
    """Get a category by id."""
    category = await category_service.get_category(category_id)
    return Envelope(
        message="Category fetched successfully", data=CategoryResponse.model_validate(category)
    )


@router.put("/{category_id}", response_model=Envelope[CategoryResponse])
async def update_category(
    category_id: str,
    category_update: CategoryUpdate,
    identity: Identity = Depends(get_current_identity),
    category_service: CategoryService = Depends(get_category_service),
):
    """Update a category."""
    category = await category_service.update_category(
        category_id, category_update.model_dump(exclude_none=True), identity
    )
    return Envelope(
        message="Category updated successfully", data=CategoryResponse.model_validate(category)
    )


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: str,
    identity: Identity = Depends(get_current_identity),
    category_service: CategoryService = Depends(get_category_service),
):
    """Delete a category."""
    await category_service.delete_category(category_id, identity)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
