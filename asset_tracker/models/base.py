"""
Database engine, session management, and base model.

This module is the foundation for all database operations.
Every model inherits from Base. Every request gets a session
from get_db().
"""

from datetime import datetime, timezone

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from asset_tracker.config import get_settings

settings = get_settings()

# --- Engine ---
# The engine manages a pool of database connections.
# pool_pre_ping=True tests connections before using them,
# which handles cases where the database restarted or a
# connection went stale.
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
)

# --- Session Factory ---
# Each call to SessionLocal() creates a new session.
# autocommit=False means repositories explicitly decide when
# a mutation is committed. The audit trail is written only
# after that commit succeeds.
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


# --- Base Model Class ---
# Every database model (Asset, Location, AuditLog, etc.)
# inherits from this class. SQLAlchemy uses it to track
# all models and generate the correct SQL for table creation.
class Base(DeclarativeBase):
    pass


def utcnow() -> datetime:
    """Naive UTC timestamp, the format every DateTime column stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def init_db(bind=None) -> None:
    """
    Create any tables that don't exist yet.

    There is no migration history: the schema is derived from
    the models at startup and existing tables are left alone.
    Connection or DDL failures propagate to the caller.
    """
    # Importing the package registers every model on Base.metadata
    import asset_tracker.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


# --- Dependency for FastAPI ---
def get_db():
    """
    Provide a database session for a single request.

    This is a generator that FastAPI uses as a dependency.
    It creates a session, gives it to the endpoint function,
    and guarantees cleanup when the request finishes,
    even if an error occurs.

    The try/finally pattern ensures the session is always
    closed, preventing connection leaks.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
