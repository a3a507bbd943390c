"""Business logic services."""

from asset_tracker.services.audit_service import AuditService
from asset_tracker.services.asset_service import AssetService
from asset_tracker.services.category_service import CategoryService
from asset_tracker.services.location_service import LocationService

__all__ = ["AuditService", "AssetService", "CategoryService", "LocationService"]
