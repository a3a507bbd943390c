"""
Shared enumerations for database models.

Using Python enums mapped to database enums ensures that
only valid values can be stored. An invalid asset status
or audit action is caught at the database level, not just
in Python validation.
"""

import enum


class AssetStatus(str, enum.Enum):
    """Physical condition of an asset."""
    GOOD = "GOOD"
    DAMAGED = "DAMAGED"
    INADEQUATE = "INADEQUATE"


class AuditEntityType(str, enum.Enum):
    """Kinds of entity whose mutations are audited."""
    ASSET = "ASSET"
    CATEGORY = "CATEGORY"
    LOCATION = "LOCATION"


class AuditAction(str, enum.Enum):
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
