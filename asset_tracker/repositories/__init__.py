"""Data access: one repository per entity plus the audit log store."""

from asset_tracker.repositories.asset_repository import AssetRepository
from asset_tracker.repositories.audit_log_store import AuditLogStore
from asset_tracker.repositories.category_repository import CategoryRepository
from asset_tracker.repositories.location_repository import LocationRepository

__all__ = [
    "AssetRepository",
    "AuditLogStore",
    "CategoryRepository",
    "LocationRepository",
]
