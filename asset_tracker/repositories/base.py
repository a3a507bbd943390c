"""
Shared repository plumbing.

Repositories own the transaction boundary for a single write:
every mutating method commits before it returns, so a caller
that gets a result back knows the change is durable. Database
failures are rolled back and re-raised as domain errors; no
SQLAlchemy exception leaves this package.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Generic, Protocol, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from asset_tracker.errors import ConflictError, NotFoundError, StorageError
from asset_tracker.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


@contextmanager
def storage_errors(db: Session, operation: str) -> Iterator[None]:
    """Roll back and translate SQLAlchemy errors raised inside the block."""
    try:
        yield
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(f"{operation} violates a constraint: {e.orig}") from e
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError(f"{operation} failed: {e}") from e


class EntityRepository(Protocol[ModelT]):
    """What the services need from a repository. Test doubles implement this."""

    def create(self, **fields: Any) -> ModelT: ...

    def get(self, entity_id: int) -> ModelT: ...

    def list_all(self, **filters: Any) -> list[ModelT]: ...

    def update(self, entity: ModelT, fields: dict[str, Any]) -> ModelT: ...

    def delete(self, entity: ModelT) -> None: ...


class SQLAlchemyRepository(Generic[ModelT]):
    """CRUD for one model class, committed per operation."""

    model: type[ModelT]
    entity_name: str

    def __init__(self, db: Session):
        self.db = db

    def create(self, **fields: Any) -> ModelT:
        entity = self.model(**fields)
        with storage_errors(self.db, f"create {self.entity_name}"):
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)
        return entity

    def get(self, entity_id: int) -> ModelT:
        with storage_errors(self.db, f"get {self.entity_name}"):
            entity = self.db.get(self.model, entity_id)
        if entity is None:
            raise NotFoundError(self.entity_name, entity_id)
        return entity

    def list_all(self, **filters: Any) -> list[ModelT]:
        """All rows matching the given column values, oldest first.

        Filters whose value is None are ignored.
        """
        stmt = select(self.model)
        for column, value in filters.items():
            if value is not None:
                stmt = stmt.where(getattr(self.model, column) == value)
        with storage_errors(self.db, f"list {self.entity_name}"):
            rows = self.db.execute(stmt.order_by(self.model.id)).scalars().all()
        return list(rows)

    def update(self, entity: ModelT, fields: dict[str, Any]) -> ModelT:
        for column, value in fields.items():
            setattr(entity, column, value)
        with storage_errors(self.db, f"update {self.entity_name}"):
            self.db.commit()
            self.db.refresh(entity)
        return entity

    def delete(self, entity: ModelT) -> None:
        with storage_errors(self.db, f"delete {self.entity_name}"):
            self.db.delete(entity)
            self.db.commit()
