"""
Exception types and handlers for consistent error handling.

Provides:
- Business exception types (ValidationError, EntityNotFoundError, etc.)
- FastAPI exception handlers
- Error DTO for API responses
"""

from .exceptions import (
    TaskTrackerException,
    ValidationError,
    UnauthenticatedError,
    InvalidTokenError,
    EntityNotFoundError,
    DuplicateEntityError,
    InternalServiceError,
    ConfigurationError,
    EntityOperation,
)
from .exception_handlers import register_exception_handlers
from .error_dto import ErrorResponse

__all__ = [
    "TaskTrackerException",
    "ValidationError",
    "UnauthenticatedError",
    "InvalidTokenError",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "InternalServiceError",
    "ConfigurationError",
    "EntityOperation",
    "register_exception_handlers",
    "ErrorResponse",
]
