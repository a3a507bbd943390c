"""
Asset API endpoints.
"""

from fastapi import APIRouter, Depends, Response

from asset_tracker.api.deps import get_actor, get_asset_service
from asset_tracker.api.errors import to_http_exception
from asset_tracker.errors import AssetTrackerError
from asset_tracker.models.enums import AssetStatus
from asset_tracker.services.asset_service import AssetService
from asset_tracker.schemas.asset import (
    AssetBulkCreate,
    AssetCreate,
    AssetUpdate,
    AssetResponse,
)

router = APIRouter(prefix="/api/v1/assets", tags=["Assets"])


@router.post("", response_model=AssetResponse, status_code=201)
def create_asset(
    request: AssetCreate,
    service: AssetService = Depends(get_asset_service),
    actor: str | None = Depends(get_actor),
):
    """
    Register a new asset.

    The category must exist, and so must the location if one
    is given; otherwise the request is rejected with 400.
    """
    try:
        return service.create(request, actor=actor)
    except AssetTrackerError as e:
        raise to_http_exception(e)


@router.get("", response_model=list[AssetResponse])
def list_assets(
    category_id: int | None = None,
    location_id: int | None = None,
    status: AssetStatus | None = None,
    service: AssetService = Depends(get_asset_service),
):
    """List assets, optionally narrowed by category, location or status."""
    try:
        return service.list_assets(
            category_id=category_id,
            location_id=location_id,
            status=status,
        )
    except AssetTrackerError as e:
        raise to_http_exception(e)


@router.post("/bulk", response_model=list[AssetResponse], status_code=201)
def create_bulk_assets(
    request: AssetBulkCreate,
    service: AssetService = Depends(get_asset_service),
    actor: str | None = Depends(get_actor),
):
    """
    Register several identical items under one bulk id.

    Returns the created members in sequence order. Every member
    gets its own audit record.
    """
    try:
        return service.create_bulk(request, actor=actor)
    except AssetTrackerError as e:
        raise to_http_exception(e)


@router.get("/bulk/{bulk_id}", response_model=list[AssetResponse])
def list_bulk_assets(
    bulk_id: str,
    service: AssetService = Depends(get_asset_service),
):
    """Members of a bulk registration, in sequence order."""
    try:
        return service.list_bulk(bulk_id)
    except AssetTrackerError as e:
        raise to_http_exception(e)


@router.get("/{asset_id}", response_model=AssetResponse)
def get_asset(
    asset_id: int,
    service: AssetService = Depends(get_asset_service),
):
    """Get asset details."""
    try:
        return service.get(asset_id)
    except AssetTrackerError as e:
        raise to_http_exception(e)


@router.put("/{asset_id}", response_model=AssetResponse)
def update_asset(
    asset_id: int,
    request: AssetUpdate,
    service: AssetService = Depends(get_asset_service),
    actor: str | None = Depends(get_actor),
):
    """Update an asset. Only the fields present in the body change."""
    try:
        return service.update(asset_id, request, actor=actor)
    except AssetTrackerError as e:
        raise to_http_exception(e)


@router.delete("/{asset_id}", status_code=204)
def delete_asset(
    asset_id: int,
    service: AssetService = Depends(get_asset_service),
    actor: str | None = Depends(get_actor),
):
    try:
        service.delete(asset_id, actor=actor)
    except AssetTrackerError as e:
        raise to_http_exception(e)
    return Response(status_code=204)
