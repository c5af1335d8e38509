"""Error handlers and request logging middleware."""

from __future__ import annotations

import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from todokit.core.logging import add_request_context, clear_request_context, get_logger

logger = get_logger(__name__)

NOT_FOUND_TEXT = "404: Page not found"


def _format_validation_errors(exc: RequestValidationError) -> str:
    """Collapse pydantic validation errors into one human-readable line."""
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


async def validation_error_handler(request: Request, exc: RequestValidationError) -> Response:
    """Return 400 with an error message for malformed request bodies or parameters."""
    detail = _format_validation_errors(exc)
    logger.info("request.invalid", path=request.url.path, detail=detail)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": detail})


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> Response:
    """Return 500 relaying the storage error message verbatim."""
    logger.error("store.query_failed", path=request.url.path, error=str(exc), exc_info=exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": str(exc)})


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Answer unmatched routes and methods with a plain-text 404."""
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return PlainTextResponse(NOT_FOUND_TEXT, status_code=status.HTTP_404_NOT_FOUND)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


def add_error_handlers(app: FastAPI) -> None:
    """Install the service's exception handlers on the app."""
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)


def add_logging_middleware(app: FastAPI) -> None:
    """Log every request with a request id bound to the logging context."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        clear_request_context()
        add_request_context(request_id=request_id, method=request.method, path=request.url.path)

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("request.failed", duration_ms=round((time.perf_counter() - start) * 1000, 2))
            raise

        logger.info(
            "request.completed",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        response.headers["X-Request-ID"] = request_id
        clear_request_context()
        return response
