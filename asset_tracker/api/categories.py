"""
Asset category API endpoints.

The API layer is thin: it handles HTTP concerns (status codes,
response formatting) and delegates everything else to the
CategoryService.
"""

from fastapi import APIRouter, Depends, Response

from asset_tracker.api.deps import get_actor, get_category_service
from asset_tracker.api.errors import to_http_exception
from asset_tracker.errors import AssetTrackerError
from asset_tracker.services.category_service import CategoryService
from asset_tracker.schemas.category import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
)

router = APIRouter(prefix="/api/v1/categories", tags=["Categories"])


@router.post("", response_model=CategoryResponse, status_code=201)
def create_category(
    request: CategoryCreate,
    service: CategoryService = Depends(get_category_service),
    actor: str | None = Depends(get_actor),
):
    """Create a new asset category."""
    try:
        return service.create(request, actor=actor)
    except AssetTrackerError as e:
        raise to_http_exception(e)


@router.get("", response_model=list[CategoryResponse])
def list_categories(
    service: CategoryService = Depends(get_category_service),
):
    """List every category."""
    try:
        return service.list_all()
    except AssetTrackerError as e:
        raise to_http_exception(e)


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
):
    try:
        return service.get(category_id)
    except AssetTrackerError as e:
        raise to_http_exception(e)


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: int,
    request: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
    actor: str | None = Depends(get_actor),
):
    """Update the fields sent in the body; the rest are left alone."""
    try:
        return service.update(category_id, request, actor=actor)
    except AssetTrackerError as e:
        raise to_http_exception(e)


@router.delete("/{category_id}", status_code=204)
def delete_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
    actor: str | None = Depends(get_actor),
):
    """
    Delete a category.

    Returns 409 while any asset still belongs to it.
    """
    try:
        service.delete(category_id, actor=actor)
    except AssetTrackerError as e:
        raise to_http_exception(e)
    return Response(status_code=204)
