"""
Domain error taxonomy.

Services and repositories raise these instead of HTTP errors.
The API layer decides which status code each one maps to.
"""


class AssetTrackerError(Exception):
    """Base class for all errors raised by the application."""


class ValidationError(AssetTrackerError):
    """Input is malformed or breaks a business rule."""


class NotFoundError(AssetTrackerError):
    """The requested entity does not exist."""

    def __init__(self, entity: str, entity_id: int | str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class StorageError(AssetTrackerError):
    """The database rejected or could not complete an operation."""


class ConflictError(StorageError):
    """A unique or foreign key constraint was violated."""
