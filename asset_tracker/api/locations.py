"""
Location API endpoints.

The API layer is thin: it handles HTTP concerns (status codes,
response formatting) and delegates everything else to the
LocationService.
"""

from fastapi import APIRouter, Depends, Response

from asset_tracker.api.deps import get_actor, get_location_service
from asset_tracker.api.errors import to_http_exception
from asset_tracker.errors import AssetTrackerError
from asset_tracker.services.location_service import LocationService
from asset_tracker.schemas.location import (
    LocationCreate,
    LocationUpdate,
    LocationResponse,
)

router = APIRouter(prefix="/api/v1/locations", tags=["Locations"])


@router.post("", response_model=LocationResponse, status_code=201)
def create_location(
    request: LocationCreate,
    service: LocationService = Depends(get_location_service),
    actor: str | None = Depends(get_actor),
):
    """Create a new location."""
    try:
        return service.create(request, actor=actor)
    except AssetTrackerError as e:
        raise to_http_exception(e)


@router.get("", response_model=list[LocationResponse])
def list_locations(
    service: LocationService = Depends(get_location_service),
):
    """List every location."""
    try:
        return service.list_all()
    except AssetTrackerError as e:
        raise to_http_exception(e)


@router.get("/{location_id}", response_model=LocationResponse)
def get_location(
    location_id: int,
    service: LocationService = Depends(get_location_service),
):
    try:
        return service.get(location_id)
    except AssetTrackerError as e:
        raise to_http_exception(e)


@router.put("/{location_id}", response_model=LocationResponse)
def update_location(
    location_id: int,
    request: LocationUpdate,
    service: LocationService = Depends(get_location_service),
    actor: str | None = Depends(get_actor),
):
    """Update the fields sent in the body; the rest are left alone."""
    try:
        return service.update(location_id, request, actor=actor)
    except AssetTrackerError as e:
        raise to_http_exception(e)


@router.delete("/{location_id}", status_code=204)
def delete_location(
    location_id: int,
    service: LocationService = Depends(get_location_service),
    actor: str | None = Depends(get_actor),
):
    """
    Delete a location.

    Returns 409 while any asset is still placed there.
    """
    try:
        service.delete(location_id, actor=actor)
    except AssetTrackerError as e:
        raise to_http_exception(e)
    return Response(status_code=204)
