"""
Business exception types.

Every exception raised by the service layer derives from
TaskTrackerException and carries the HTTP status the API surface maps it to.
"""

from enum import Enum
from typing import Optional


class EntityOperation(str, Enum):
    """Operation that was being attempted when an entity error occurred."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


class TaskTrackerException(Exception):
    """Base exception for all task tracker business errors."""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(TaskTrackerException):
    """Bad or missing client input."""

    status_code = 400

    def __init__(
        self,
        message: str,
        validation_details: Optional[dict[str, list[str]]] = None,
    ):
        super().__init__(message)
        self.validation_details = validation_details or {}

    @classmethod
    def for_field(cls, field: str, reason: str) -> "ValidationError":
        """Build a validation error describing a single field."""
        return cls(reason, validation_details={field: [reason]})


class UnauthenticatedError(TaskTrackerException):
    """No usable credential was supplied with the request."""

    status_code = 401

    def __init__(self, message: str = "No token provided"):
        super().__init__(message)


class InvalidTokenError(TaskTrackerException):
    """A credential was supplied but failed signature or expiry checks."""

    status_code = 403

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class EntityNotFoundError(TaskTrackerException):
    """
    The requested entity does not exist for the caller.

    Raised identically whether the entity is absent or owned by someone
    else, so responses never reveal another user's data.
    """

    status_code = 404

    def __init__(
        self,
        entity_type: str,
        entity_id: Optional[str] = None,
        operation: EntityOperation = EntityOperation.READ,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.operation = operation
        super().__init__(f"{entity_type} not found")


class DuplicateEntityError(TaskTrackerException):
    """An entity with the same unique key already exists."""

    status_code = 409

    def __init__(self, entity_type: str, field: str):
        self.entity_type = entity_type
        self.field = field
        super().__init__(f"{entity_type} with this {field} already exists")


class InternalServiceError(TaskTrackerException):
    """Store or infrastructure failure."""

    status_code = 500

    def __init__(self, message: str = "An unexpected error occurred"):
        super().__init__(message)


class ConfigurationError(TaskTrackerException):
    """Required process configuration is missing or invalid at startup."""

    def __init__(self, message: str):
        super().__init__(message)
