"""
Tests for CategoryService and LocationService against the
SQLite test database.
"""

import pytest

from asset_tracker.errors import ConflictError, NotFoundError
from asset_tracker.models.enums import AuditAction, AuditEntityType
from asset_tracker.repositories import (
    AssetRepository,
    CategoryRepository,
    LocationRepository,
)
from asset_tracker.schemas.asset import AssetCreate
from asset_tracker.schemas.category import CategoryCreate, CategoryUpdate
from asset_tracker.schemas.location import LocationCreate, LocationUpdate
from asset_tracker.services.asset_service import AssetService
from asset_tracker.services.category_service import CategoryService
from asset_tracker.services.location_service import LocationService


@pytest.fixture
def category_service(db_session, audit_service):
    return CategoryService(
        CategoryRepository(db_session), AssetRepository(db_session), audit_service
    )


@pytest.fixture
def location_service(db_session, audit_service):
    return LocationService(
        LocationRepository(db_session), AssetRepository(db_session), audit_service
    )


@pytest.fixture
def asset_service(db_session, audit_service):
    return AssetService(
        AssetRepository(db_session),
        CategoryRepository(db_session),
        LocationRepository(db_session),
        audit_service,
    )


class TestCategoryService:

    def test_update_records_before_and_after(self, category_service, audit_service):
        category = category_service.create(
            CategoryCreate(code="10", name="Furniture", description="Old")
        )
        category_service.update(
            category.id, CategoryUpdate(description="New"), actor="alice"
        )

        update = audit_service.list_by_entity(
            AuditEntityType.CATEGORY, category.id
        )[0]
        assert update.action == AuditAction.UPDATE
        assert update.changes["before"]["description"] == "Old"
        assert update.changes["after"]["description"] == "New"
        assert update.changes["changed"] == ["description"]

    def test_update_with_same_values_still_audited(
        self, category_service, audit_service
    ):
        category = category_service.create(CategoryCreate(code="10", name="A"))
        category_service.update(category.id, CategoryUpdate(name="A"))

        logs = audit_service.list_by_entity(AuditEntityType.CATEGORY, category.id)
        assert len(logs) == 2
        assert logs[0].changes["changed"] == []

    def test_delete_in_use_refused_without_audit(
        self, category_service, asset_service, audit_service
    ):
        category = category_service.create(CategoryCreate(code="10", name="A"))
        asset_service.create(AssetCreate(code="X", name="X", category_id=category.id))
        before = len(audit_service.list_all())

        with pytest.raises(ConflictError, match="still used by 1 asset"):
            category_service.delete(category.id)

        assert len(audit_service.list_all()) == before
        assert category_service.get(category.id).name == "A"

    def test_delete_missing_raises_not_found(self, category_service):
        with pytest.raises(NotFoundError):
            category_service.delete(999)


class TestLocationService:

    def test_create_and_delete_audited(self, location_service, audit_service):
        location = location_service.create(
            LocationCreate(code="L1", name="Lobby", building="A")
        )
        location_id = location.id
        location_service.delete(location_id, actor="bob")

        logs = audit_service.list_by_entity(AuditEntityType.LOCATION, location_id)
        assert [log.action for log in logs] == [AuditAction.DELETE, AuditAction.CREATE]
        assert logs[0].changes == {"before": logs[1].changes["after"]}
        assert logs[0].actor == "bob"

    def test_delete_holding_assets_refused(
        self, location_service, category_service, asset_service
    ):
        location = location_service.create(LocationCreate(code="L1", name="Lobby"))
        category = category_service.create(CategoryCreate(code="10", name="A"))
        asset_service.create(AssetCreate(
            code="X", name="X", category_id=category.id, location_id=location.id,
        ))

        with pytest.raises(ConflictError, match="still holds 1 asset"):
            location_service.delete(location.id)

    def test_update_duplicate_code_is_conflict(self, location_service, audit_service):
        location_service.create(LocationCreate(code="L1", name="One"))
        second = location_service.create(LocationCreate(code="L2", name="Two"))
        before = len(audit_service.list_all())

        with pytest.raises(ConflictError):
            location_service.update(second.id, LocationUpdate(code="L1"))

        assert len(audit_service.list_all()) == before
        assert location_service.get(second.id).code == "L2"
