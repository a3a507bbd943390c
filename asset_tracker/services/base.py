"""
Audited CRUD: the mutation workflow shared by every entity service.

Each mutation runs in the same order:
1. Validate (in the concrete service)
2. Write through the repository, which commits
3. Record the audit entry
4. Return the repository's result

A repository failure propagates unchanged and nothing is
audited. An audit failure after a successful write is logged
and swallowed: the committed mutation stands and its result
is returned as if the audit had succeeded.
"""

from typing import Any, Generic

from pydantic import BaseModel

from asset_tracker.errors import StorageError, ValidationError
from asset_tracker.models.enums import AuditAction, AuditEntityType
from asset_tracker.observability import get_logger
from asset_tracker.repositories.base import EntityRepository, ModelT
from asset_tracker.services.audit_service import AuditService

logger = get_logger(__name__)

# Bookkeeping columns left out of the "changed" list of an update
UNTRACKED_FIELDS = frozenset({"id", "created_at", "updated_at"})


class AuditedService(Generic[ModelT]):
    """
    Base class for services whose mutations are audited.

    Subclasses set entity_type, response_schema (used to
    snapshot an entity into JSON for the audit record) and
    required_fields (columns an update may not set to null).
    """

    entity_type: AuditEntityType
    response_schema: type[BaseModel]
    required_fields: frozenset[str] = frozenset()

    def __init__(
        self,
        repository: EntityRepository[ModelT],
        audit_service: AuditService,
    ):
        self.repository = repository
        self.audit_service = audit_service

    @property
    def _event_prefix(self) -> str:
        return self.entity_type.value.lower()

    def snapshot(self, entity: ModelT) -> dict[str, Any]:
        """JSON-safe view of an entity, as the API would return it."""
        return self.response_schema.model_validate(entity).model_dump(mode="json")

    # --- Reads: no audit side effect ---

    def get(self, entity_id: int) -> ModelT:
        return self.repository.get(entity_id)

    def list_all(self, **filters: Any) -> list[ModelT]:
        return self.repository.list_all(**filters)

    # --- Audited mutations ---

    def _create(self, fields: dict[str, Any], actor: str | None) -> ModelT:
        entity = self.repository.create(**fields)
        self._audit(AuditAction.CREATE, entity.id, actor, {
            "after": self.snapshot(entity),
        })
        logger.info(f"{self._event_prefix}_created", entity_id=entity.id, actor=actor)
        return entity

    def _update(
        self, entity_id: int, fields: dict[str, Any], actor: str | None
    ) -> ModelT:
        if not fields:
            raise ValidationError("Update must change at least one field")
        nulled = sorted(
            name for name in self.required_fields
            if name in fields and fields[name] is None
        )
        if nulled:
            raise ValidationError(f"Fields cannot be null: {', '.join(nulled)}")

        entity = self.repository.get(entity_id)
        before = self.snapshot(entity)
        fields = self._derive_update(entity, fields)
        entity = self.repository.update(entity, fields)
        after = self.snapshot(entity)

        changed = sorted(
            name for name, value in after.items()
            if name not in UNTRACKED_FIELDS and before.get(name) != value
        )
        self._audit(AuditAction.UPDATE, entity_id, actor, {
            "before": before,
            "after": after,
            "changed": changed,
        })
        logger.info(
            f"{self._event_prefix}_updated",
            entity_id=entity_id,
            changed=changed,
            actor=actor,
        )
        return entity

    def _derive_update(
        self, entity: ModelT, fields: dict[str, Any]
    ) -> dict[str, Any]:
        """Hook for columns computed from other columns. Default: none."""
        return fields

    def _delete(self, entity: ModelT, actor: str | None) -> None:
        entity_id = entity.id
        before = self.snapshot(entity)
        self.repository.delete(entity)
        self._audit(AuditAction.DELETE, entity_id, actor, {"before": before})
        logger.info(f"{self._event_prefix}_deleted", entity_id=entity_id, actor=actor)

    def _audit(
        self,
        action: AuditAction,
        entity_id: int,
        actor: str | None,
        changes: dict[str, Any],
    ) -> None:
        try:
            self.audit_service.record(
                self.entity_type, entity_id, action, actor, changes
            )
        except StorageError as e:
            logger.warning(
                "audit_write_failed",
                entity_type=self.entity_type.value,
                entity_id=entity_id,
                action=action.value,
                error=str(e),
            )
