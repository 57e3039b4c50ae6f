"""Exception handlers rendering every failure as ``{"error", "message"?}``."""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared_kernel.errors import WebMallHTTPError

logger = structlog.get_logger()


def _error_body(exc: StarletteHTTPException) -> dict[str, Any]:
    if isinstance(exc, WebMallHTTPError):
        return exc.to_body()
    return {"error": str(exc.detail)}


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTP errors, keeping any headers they carry."""
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failures as 400 with the first problem."""
    errors = exc.errors()
    message = None
    if errors:
        first = errors[0]
        location = ".".join(
            str(part) for part in first.get("loc", ()) if part not in ("body", "query")
        )
        message = f"{location}: {first.get('msg')}" if location else first.get("msg")
    body: dict[str, Any] = {"error": "Invalid request"}
    if message:
        body["message"] = message
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log server-side, return a generic 500."""
    logger.error(
        "unhandled_exception",
        method=request.method,
        path=request.url.path,
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
