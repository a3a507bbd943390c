"""HTTP middleware: request logging, CORS and panic recovery.

Registered in main.py. Starlette runs the last added middleware
outermost, so a request passes through request logging, then CORS,
then recovery, which sits closest to the routes.
"""

import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from structlog.contextvars import bind_contextvars, clear_contextvars

from asset_tracker.observability.logging import get_logger

logger = get_logger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Headers": (
        "Content-Type, Content-Length, Accept-Encoding, X-CSRF-Token, "
        "Authorization, accept, origin, Cache-Control, X-Requested-With, "
        "X-Actor"
    ),
    "Access-Control-Allow-Methods": "POST, OPTIONS, GET, PUT, DELETE",
}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Bind a request id to structlog contextvars and log each request.

    The id is taken from the X-Request-ID header when the caller sends
    one, and echoed back on the response.
    """

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        clear_contextvars()
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        bind_contextvars(request_id=request_id)

        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - started) * 1000, 2)

        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=duration_ms,
        )
        response.headers["X-Request-ID"] = request_id
        return response


class PermissiveCORSMiddleware(BaseHTTPMiddleware):
    """Permissive CORS: any origin, and every OPTIONS request gets a 204."""

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)

        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response


class RecoveryMiddleware(BaseHTTPMiddleware):
    """Turn any unhandled exception into a generic 500 response.

    The process keeps serving; the exception is logged with its
    traceback.
    """

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception(
                "unhandled_exception",
                method=request.method,
                path=request.url.path,
            )
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal server error"},
            )
