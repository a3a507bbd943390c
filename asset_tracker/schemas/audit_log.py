"""
Pydantic schemas for audit logs. Audit logs are read-only over
the API, so there are no request schemas.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from asset_tracker.models.enums import AuditAction, AuditEntityType


class AuditLogResponse(BaseModel):
    id: int
    entity_type: AuditEntityType
    entity_id: int
    action: AuditAction
    actor: str | None
    changes: dict[str, Any]
    created_at: datetime

    model_config = {"from_attributes": True}
