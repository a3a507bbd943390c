"""
Asset Tracker — FastAPI Application.

This is the entry point for the application. All routers
and middleware are registered here, the schema is created
on startup, and run() serves the app with uvicorn.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from asset_tracker.config import get_settings
from asset_tracker.api.assets import router as assets_router
from asset_tracker.api.audit_logs import router as audit_logs_router
from asset_tracker.api.categories import router as categories_router
from asset_tracker.api.health import router as health_router
from asset_tracker.api.locations import router as locations_router
from asset_tracker.models.base import init_db
from asset_tracker.observability import get_logger, setup_logging
from asset_tracker.observability.middleware import (
    PermissiveCORSMiddleware,
    RecoveryMiddleware,
    RequestLoggingMiddleware,
)

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: configure logging and create missing tables.

    A database that can't be reached or a schema that can't be
    created is fatal; the exception propagates and the server
    exits before accepting any request.
    """
    setup_logging(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)
    try:
        init_db()
    except Exception:
        logger.critical("database_init_failed", exc_info=True)
        raise
    logger.info("database_ready")
    yield
    logger.info("server_stopped")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Tracks physical assets, categories and locations with a full audit trail",
    debug=settings.debug,
    lifespan=lifespan,
)

# Middleware: the last one added runs first
app.add_middleware(RecoveryMiddleware)
app.add_middleware(PermissiveCORSMiddleware)
app.add_middleware(RequestLoggingMiddleware)

# Register routers
app.include_router(health_router)
app.include_router(categories_router)
app.include_router(locations_router)
app.include_router(assets_router)
app.include_router(audit_logs_router)


def run() -> None:
    """
    Serve the app until SIGINT/SIGTERM.

    On a signal uvicorn stops accepting connections and gives
    in-flight requests SHUTDOWN_TIMEOUT seconds to finish.
    """
    setup_logging(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)
    logger.info("starting_server", host=settings.HOST, port=settings.PORT)
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        timeout_graceful_shutdown=settings.SHUTDOWN_TIMEOUT,
        log_level=settings.LOG_LEVEL.lower(),
    )
