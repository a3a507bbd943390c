"""
Dependency providers, the composition root for a request.

Each request gets one session from get_db(). Repositories,
the audit service and the entity services are built around
it here and nowhere else, so routers only ever ask for a
finished service.
"""

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from asset_tracker.models.base import get_db
from asset_tracker.repositories import (
    AssetRepository,
    AuditLogStore,
    CategoryRepository,
    LocationRepository,
)
from asset_tracker.services import (
    AssetService,
    AuditService,
    CategoryService,
    LocationService,
)


def get_actor(x_actor: str | None = Header(default=None, max_length=100)) -> str | None:
    """Who is making the change, if the caller says so. Recorded on audit logs."""
    return x_actor


def get_audit_service(db: Session = Depends(get_db)) -> AuditService:
    return AuditService(AuditLogStore(db))


def get_category_service(
    db: Session = Depends(get_db),
    audit_service: AuditService = Depends(get_audit_service),
) -> CategoryService:
    return CategoryService(
        CategoryRepository(db), AssetRepository(db), audit_service
    )


def get_location_service(
    db: Session = Depends(get_db),
    audit_service: AuditService = Depends(get_audit_service),
) -> LocationService:
    return LocationService(
        LocationRepository(db), AssetRepository(db), audit_service
    )


def get_asset_service(
    db: Session = Depends(get_db),
    audit_service: AuditService = Depends(get_audit_service),
) -> AssetService:
    return AssetService(
        AssetRepository(db),
        CategoryRepository(db),
        LocationRepository(db),
        audit_service,
    )
