"""
Audit log model.

Records every mutation of an asset, category or location.
The trail is derived from the primary writes: the entity
tables are the source of truth, the audit log explains how
they got there.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, String, DateTime, Index, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from asset_tracker.models.base import Base, utcnow
from asset_tracker.models.enums import AuditAction, AuditEntityType


class AuditLog(Base):
    """
    Immutable record of a single mutation.

    Audit logs are append-only. The application never updates
    or deletes an audit record. entity_id is a plain integer,
    not a foreign key, so the record outlives the entity it
    describes.
    """

    __tablename__ = "audit_logs"
    __table_args__ = (
        Index("ix_audit_logs_entity", "entity_type", "entity_id"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    entity_type: Mapped[AuditEntityType] = mapped_column(
        SAEnum(
            AuditEntityType,
            name="audit_entity_type_enum",
            create_constraint=True,
        ),
        nullable=False,
    )
    entity_id: Mapped[int] = mapped_column(nullable=False)
    action: Mapped[AuditAction] = mapped_column(
        SAEnum(AuditAction, name="audit_action_enum", create_constraint=True),
        nullable=False,
    )
    actor: Mapped[str | None] = mapped_column(String(100), nullable=True)
    changes: Mapped[dict[str, Any]] = mapped_column(
        JSON, nullable=False, default=dict
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return (
            f"<AuditLog {self.action.value} "
            f"{self.entity_type.value}:{self.entity_id}>"
        )
