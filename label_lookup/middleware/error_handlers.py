"""Exception handlers for the application."""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from label_lookup.exceptions import ErrorCode, LabelLookupException
from label_lookup.logging_config import get_logger, log_with_context
from label_lookup.models.label import INTERNAL_FAILURE_MESSAGE

logger = get_logger(__name__)


def error_body(code: str, message: str, status_code: int, details: dict[str, Any] | None = None) -> dict[str, Any]:
    return {"error": {"code": code, "message": message, "status_code": status_code, "details": details or {}}}


async def label_lookup_exception_handler(request: Request, exc: LabelLookupException) -> JSONResponse:
    """Handle label lookup exceptions with proper HTTP status codes.

    Returns structured JSON error responses with status code, error code,
    message, and optional details.
    """
    log_with_context(
        logger,
        "warning",
        "Label lookup error",
        error_code=exc.code.value,
        error_message=exc.message,
        status_code=exc.status_code,
        method=request.method,
        url=str(request.url),
        event_type="label_lookup_error",
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.code.value, exc.message, exc.status_code, exc.details),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle general exceptions with logging."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        url=str(request.url),
        event_type="unhandled_error",
    )
    logger.error("Exception traceback:", exc_info=exc)

    # Don't expose internal error details to clients
    return JSONResponse(
        status_code=500,
        content=error_body(ErrorCode.INTERNAL_FAILURE.value, INTERNAL_FAILURE_MESSAGE, 500),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(LabelLookupException, label_lookup_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
