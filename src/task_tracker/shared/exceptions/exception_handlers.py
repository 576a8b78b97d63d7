"""
FastAPI exception handlers translating business exceptions to HTTP responses.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .error_dto import ErrorResponse
from .exceptions import (
    InternalServiceError,
    TaskTrackerException,
    ValidationError,
)

log = logging.getLogger(__name__)


def _error_response(exc: TaskTrackerException) -> JSONResponse:
    body = ErrorResponse(message=exc.message, error=type(exc).__name__)
    if isinstance(exc, ValidationError) and exc.validation_details:
        body.validation_details = exc.validation_details
    return JSONResponse(status_code=exc.status_code, content=body.to_content())


async def task_tracker_exception_handler(
    request: Request, exc: TaskTrackerException
) -> JSONResponse:
    """Handle every TaskTrackerException subclass using its status code."""
    if exc.status_code >= 500:
        log.error(
            "%s on %s %s: %s",
            type(exc).__name__,
            request.method,
            request.url.path,
            exc.message,
        )
    else:
        log.debug(
            "%s on %s %s: %s",
            type(exc).__name__,
            request.method,
            request.url.path,
            exc.message,
        )
    return _error_response(exc)


async def internal_service_error_handler(
    request: Request, exc: InternalServiceError
) -> JSONResponse:
    """Return a generic 500 without exposing internal details."""
    log.error(
        "Internal service error on %s %s: %s",
        request.method,
        request.url.path,
        exc.message,
    )
    return _error_response(InternalServiceError())


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Map request schema violations to a 400 ValidationError body."""
    details: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc) or "body"
        details.setdefault(field, []).append(error.get("msg", "Invalid value"))

    log.debug(
        "Request validation failed on %s %s: %s",
        request.method,
        request.url.path,
        details,
    )
    body = ErrorResponse(
        message="Invalid request parameters",
        error=ValidationError.__name__,
        validation_details=details,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content=body.to_content()
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unexpected failures, including store errors."""
    log.exception(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        exc,
    )
    body = ErrorResponse(
        message="An unexpected server error occurred",
        error=InternalServiceError.__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body.to_content()
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to the application."""
    app.add_exception_handler(InternalServiceError, internal_service_error_handler)
    app.add_exception_handler(TaskTrackerException, task_tracker_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
