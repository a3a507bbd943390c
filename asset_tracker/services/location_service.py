"""
Location service — physical places and their audit trail.
"""

from asset_tracker.errors import ConflictError
from asset_tracker.models.enums import AuditEntityType
from asset_tracker.models.location import Location
from asset_tracker.repositories.asset_repository import AssetRepository
from asset_tracker.repositories.base import EntityRepository
from asset_tracker.schemas.location import (
    LocationCreate,
    LocationUpdate,
    LocationResponse,
)
from asset_tracker.services.audit_service import AuditService
from asset_tracker.services.base import AuditedService


class LocationService(AuditedService[Location]):
    entity_type = AuditEntityType.LOCATION
    response_schema = LocationResponse
    required_fields = frozenset({"code", "name"})

    def __init__(
        self,
        repository: EntityRepository[Location],
        asset_repository: AssetRepository,
        audit_service: AuditService,
    ):
        super().__init__(repository, audit_service)
        self.asset_repository = asset_repository

    def create(self, request: LocationCreate, actor: str | None = None) -> Location:
        return self._create(request.model_dump(), actor)

    def update(
        self,
        location_id: int,
        request: LocationUpdate,
        actor: str | None = None,
    ) -> Location:
        return self._update(
            location_id, request.model_dump(exclude_unset=True), actor
        )

    def delete(self, location_id: int, actor: str | None = None) -> None:
        """
        Delete a location.

        Assets must be moved out first. Clearing their location
        here would change them without an audit record of their own.
        """
        location = self.repository.get(location_id)
        in_use = self.asset_repository.count_by_location(location_id)
        if in_use:
            raise ConflictError(
                f"Location {location_id} still holds {in_use} asset(s)"
            )
        self._delete(location, actor)
