"""
Audit log API endpoints.

Read-only: audit records are only ever written as a side
effect of mutating an asset, category or location.
"""

from fastapi import APIRouter, Depends

from asset_tracker.api.deps import get_audit_service
from asset_tracker.api.errors import to_http_exception
from asset_tracker.errors import AssetTrackerError
from asset_tracker.models.enums import AuditAction, AuditEntityType
from asset_tracker.services.audit_service import AuditService
from asset_tracker.schemas.audit_log import AuditLogResponse

router = APIRouter(prefix="/api/v1/audit-logs", tags=["Audit Logs"])


@router.get("", response_model=list[AuditLogResponse])
def list_audit_logs(
    entity_type: AuditEntityType | None = None,
    action: AuditAction | None = None,
    service: AuditService = Depends(get_audit_service),
):
    """The whole audit trail, newest first."""
    try:
        return service.list_all(entity_type=entity_type, action=action)
    except AssetTrackerError as e:
        raise to_http_exception(e)


@router.get("/{log_id}", response_model=AuditLogResponse)
def get_audit_log(
    log_id: int,
    service: AuditService = Depends(get_audit_service),
):
    try:
        return service.get(log_id)
    except AssetTrackerError as e:
        raise to_http_exception(e)


@router.get(
    "/{entity_type}/{entity_id}",
    response_model=list[AuditLogResponse],
)
def list_entity_audit_logs(
    entity_type: AuditEntityType,
    entity_id: int,
    service: AuditService = Depends(get_audit_service),
):
    """
    History of a single entity, newest first.

    An entity that was never mutated (or never existed) has an
    empty history, not a 404: deleted entities keep their trail.
    """
    try:
        return service.list_by_entity(entity_type, entity_id)
    except AssetTrackerError as e:
        raise to_http_exception(e)
