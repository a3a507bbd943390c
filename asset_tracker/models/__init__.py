"""
Database models package.

All models must be imported here so that Base.metadata knows
every table when init_db() creates the schema.
"""

from asset_tracker.models.base import Base
from asset_tracker.models.enums import (
    AssetStatus,
    AuditAction,
    AuditEntityType,
)
from asset_tracker.models.audit_log import AuditLog
from asset_tracker.models.category import AssetCategory
from asset_tracker.models.location import Location
from asset_tracker.models.asset import Asset

__all__ = [
    "Base",
    "AssetStatus",
    "AuditAction",
    "AuditEntityType",
    "AuditLog",
    "AssetCategory",
    "Location",
    "Asset",
]
