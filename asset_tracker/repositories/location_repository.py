"""Location persistence."""

from asset_tracker.models.location import Location
from asset_tracker.repositories.base import SQLAlchemyRepository


class LocationRepository(SQLAlchemyRepository[Location]):
    model = Location
    entity_name = "Location"
