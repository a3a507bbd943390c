"""
Audit service — the only writer of audit log records.

Entity services hand it a structured description of a
mutation; it stamps the time, builds the AuditLog and
appends it through the store. No business validation
happens here.
"""

from typing import Any

from asset_tracker.models.audit_log import AuditLog
from asset_tracker.models.base import utcnow
from asset_tracker.models.enums import AuditAction, AuditEntityType
from asset_tracker.observability import get_logger
from asset_tracker.repositories.audit_log_store import AuditLogStore

logger = get_logger(__name__)


class AuditService:

    def __init__(self, store: AuditLogStore):
        self.store = store

    def record(
        self,
        entity_type: AuditEntityType,
        entity_id: int,
        action: AuditAction,
        actor: str | None,
        changes: dict[str, Any],
    ) -> int:
        """
        Append one audit record and return its id.

        Raises StorageError if the store cannot persist it.
        """
        record = AuditLog(
            entity_type=entity_type,
            entity_id=entity_id,
            action=action,
            actor=actor,
            changes=changes,
            created_at=utcnow(),
        )
        log_id = self.store.append(record)
        logger.info(
            "audit_recorded",
            audit_log_id=log_id,
            entity_type=entity_type.value,
            entity_id=entity_id,
            action=action.value,
            actor=actor,
        )
        return log_id

    def get(self, log_id: int) -> AuditLog:
        return self.store.get(log_id)

    def list_by_entity(
        self, entity_type: AuditEntityType, entity_id: int
    ) -> list[AuditLog]:
        return self.store.list_by_entity(entity_type, entity_id)

    def list_all(
        self,
        entity_type: AuditEntityType | None = None,
        action: AuditAction | None = None,
    ) -> list[AuditLog]:
        return self.store.list_all(entity_type=entity_type, action=action)
