"""
Mapping from domain errors to HTTP errors.

Routers catch AssetTrackerError and raise whatever this
returns. Storage failures are logged here because they are
the only ones that mean something is wrong on our side.
"""

from fastapi import HTTPException

from asset_tracker.errors import (
    AssetTrackerError,
    ConflictError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from asset_tracker.observability import get_logger

logger = get_logger(__name__)


def to_http_exception(error: AssetTrackerError) -> HTTPException:
    if isinstance(error, ValidationError):
        return HTTPException(status_code=400, detail=str(error))
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=404, detail=str(error))
    if isinstance(error, ConflictError):
        return HTTPException(status_code=409, detail=str(error))
    if isinstance(error, StorageError):
        logger.error("storage_error", error=str(error))
        return HTTPException(status_code=500, detail="Storage error")
    return HTTPException(status_code=500, detail=str(error))
