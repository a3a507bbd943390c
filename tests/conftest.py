"""
Shared test fixtures.

Sets up an isolated test database so tests never touch
the real database. Tables are created before each test and
dropped after it, so no test data persists.

Also provides in-memory test doubles for the repository and
audit store, used to inject failures the real database
can't easily produce.
"""

import itertools
import os
import threading

# Must be set before the app is imported: models.base builds its
# engine from this at import time.
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import pytest  # noqa: E402
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from asset_tracker.errors import NotFoundError, StorageError
from asset_tracker.main import app
from asset_tracker.models.base import Base, get_db, init_db, utcnow
from asset_tracker.repositories import AuditLogStore
from asset_tracker.services.audit_service import AuditService


# Use SQLite for tests — no external database needed.
TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


@pytest.fixture(autouse=True)
def setup_database():
    """
    Create all tables before each test, drop them after.

    autouse=True means every test gets this automatically.
    This ensures each test starts with a clean database.
    """
    init_db(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Provide a database session for direct service testing."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def audit_service(db_session):
    return AuditService(AuditLogStore(db_session))


@pytest.fixture
def client(db_session):
    """
    Provide a test client with the test database.

    We override the get_db dependency so the FastAPI app
    uses our test session instead of the real database.
    The lifespan isn't entered, so startup never touches the
    configured production database.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# --- Test doubles ---

class InMemoryRepository:
    """
    Dict-backed stand-in for SQLAlchemyRepository.

    Builds real (transient) model instances so services can
    snapshot them with the response schemas. Set fail_writes
    to make every mutation raise StorageError.
    """

    def __init__(self, model, entity_name):
        self.model = model
        self.entity_name = entity_name
        self.rows = {}
        self.fail_writes = False
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def _check_writable(self):
        if self.fail_writes:
            raise StorageError(f"{self.entity_name} storage unavailable")

    def create(self, **fields):
        self._check_writable()
        now = utcnow()
        with self._lock:
            entity = self.model(
                id=next(self._ids), created_at=now, updated_at=now, **fields
            )
            self.rows[entity.id] = entity
        return entity

    def get(self, entity_id):
        try:
            return self.rows[entity_id]
        except KeyError:
            raise NotFoundError(self.entity_name, entity_id)

    def list_all(self, **filters):
        return [
            row for row in self.rows.values()
            if all(
                value is None or getattr(row, column) == value
                for column, value in filters.items()
            )
        ]

    def update(self, entity, fields):
        self._check_writable()
        for column, value in fields.items():
            setattr(entity, column, value)
        entity.updated_at = utcnow()
        return entity

    def delete(self, entity):
        self._check_writable()
        with self._lock:
            del self.rows[entity.id]


class InMemoryAuditStore:
    """Thread-safe stand-in for AuditLogStore. Set fail to break appends."""

    def __init__(self):
        self.records = []
        self.fail = False
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def append(self, record):
        if self.fail:
            raise StorageError("audit storage unavailable")
        with self._lock:
            record.id = next(self._ids)
            self.records.append(record)
        return record.id

    def get(self, log_id):
        for record in self.records:
            if record.id == log_id:
                return record
        raise NotFoundError("AuditLog", log_id)

    def list_by_entity(self, entity_type, entity_id):
        matching = [
            r for r in self.records
            if r.entity_type == entity_type and r.entity_id == entity_id
        ]
        return sorted(matching, key=lambda r: (r.created_at, r.id), reverse=True)

    def list_all(self, entity_type=None, action=None):
        matching = [
            r for r in self.records
            if (entity_type is None or r.entity_type == entity_type)
            and (action is None or r.action == action)
        ]
        return sorted(matching, key=lambda r: (r.created_at, r.id), reverse=True)


class NoAssets:
    """Asset repository double for category/location deletes: nothing references them."""

    def count_by_category(self, category_id):
        return 0

    def count_by_location(self, location_id):
        return 0


@pytest.fixture
def memory_audit_store():
    return InMemoryAuditStore()


@pytest.fixture
def make_memory_repository():
    return InMemoryRepository


@pytest.fixture
def no_assets():
    return NoAssets()
