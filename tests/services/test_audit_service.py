"""
Tests for the AuditService against the SQLite test database.
"""

import pytest

from asset_tracker.errors import NotFoundError
from asset_tracker.models.enums import AuditAction, AuditEntityType


def record(service, entity_type=AuditEntityType.ASSET, entity_id=1,
           action=AuditAction.CREATE, actor=None, changes=None):
    return service.record(entity_type, entity_id, action, actor, changes or {})


class TestRecord:

    def test_returns_persisted_id(self, audit_service):
        log_id = record(audit_service, actor="alice", changes={"after": {"x": 1}})

        log = audit_service.get(log_id)
        assert log.entity_type == AuditEntityType.ASSET
        assert log.entity_id == 1
        assert log.action == AuditAction.CREATE
        assert log.actor == "alice"
        assert log.changes == {"after": {"x": 1}}

    def test_assigns_timestamp(self, audit_service):
        log = audit_service.get(record(audit_service))
        assert log.created_at is not None

    def test_ids_increase(self, audit_service):
        first = record(audit_service)
        second = record(audit_service)
        assert second > first


class TestQueries:

    def test_list_by_entity_newest_first(self, audit_service):
        ids = [
            record(audit_service, action=action)
            for action in (AuditAction.CREATE, AuditAction.UPDATE, AuditAction.DELETE)
        ]

        logs = audit_service.list_by_entity(AuditEntityType.ASSET, 1)

        assert [log.id for log in logs] == list(reversed(ids))

    def test_list_by_entity_matches_type_and_id(self, audit_service):
        record(audit_service, AuditEntityType.ASSET, 1)
        record(audit_service, AuditEntityType.ASSET, 2)
        record(audit_service, AuditEntityType.LOCATION, 1)

        logs = audit_service.list_by_entity(AuditEntityType.ASSET, 1)

        assert len(logs) == 1
        assert (logs[0].entity_type, logs[0].entity_id) == (AuditEntityType.ASSET, 1)

    def test_list_all_filters(self, audit_service):
        record(audit_service, AuditEntityType.ASSET, 1, AuditAction.CREATE)
        record(audit_service, AuditEntityType.ASSET, 1, AuditAction.UPDATE)
        record(audit_service, AuditEntityType.CATEGORY, 1, AuditAction.UPDATE)

        assert len(audit_service.list_all()) == 3
        assert len(audit_service.list_all(entity_type=AuditEntityType.ASSET)) == 2
        assert len(audit_service.list_all(action=AuditAction.UPDATE)) == 2
        assert len(audit_service.list_all(
            entity_type=AuditEntityType.CATEGORY, action=AuditAction.UPDATE,
        )) == 1

    def test_get_missing_raises(self, audit_service):
        with pytest.raises(NotFoundError):
            audit_service.get(999)
