"""
Audit log store — append-only persistence for AuditLog records.

There is no update or delete here. Records are
written once and read back by entity reference, newest first.
Failures surface as StorageError; the store never retries,
callers decide what a failed append means for them.
"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from asset_tracker.errors import NotFoundError
from asset_tracker.models.audit_log import AuditLog
from asset_tracker.models.enums import AuditAction, AuditEntityType
from asset_tracker.repositories.base import storage_errors

NEWEST_FIRST = (AuditLog.created_at.desc(), AuditLog.id.desc())


class AuditLogStore:

    def __init__(self, db: Session):
        self.db = db

    def append(self, record: AuditLog) -> int:
        """Persist a new record and return its id once committed."""
        with storage_errors(self.db, "append audit log"):
            self.db.add(record)
            self.db.commit()
            return record.id

    def get(self, log_id: int) -> AuditLog:
        with storage_errors(self.db, "get audit log"):
            record = self.db.get(AuditLog, log_id)
        if record is None:
            raise NotFoundError("AuditLog", log_id)
        return record

    def list_by_entity(
        self, entity_type: AuditEntityType, entity_id: int
    ) -> list[AuditLog]:
        """Every record for one entity, newest first."""
        stmt = (
            select(AuditLog)
            .where(
                AuditLog.entity_type == entity_type,
                AuditLog.entity_id == entity_id,
            )
            .order_by(*NEWEST_FIRST)
        )
        with storage_errors(self.db, "list audit logs"):
            return list(self.db.execute(stmt).scalars().all())

    def list_all(
        self,
        entity_type: AuditEntityType | None = None,
        action: AuditAction | None = None,
    ) -> list[AuditLog]:
        """The whole trail, newest first, optionally narrowed."""
        stmt = select(AuditLog)
        if entity_type is not None:
            stmt = stmt.where(AuditLog.entity_type == entity_type)
        if action is not None:
            stmt = stmt.where(AuditLog.action == action)
        with storage_errors(self.db, "list audit logs"):
            return list(self.db.execute(stmt.order_by(*NEWEST_FIRST)).scalars().all())
