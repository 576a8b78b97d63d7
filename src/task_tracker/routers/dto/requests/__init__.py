"""
Request DTOs for API endpoints.
"""

from .auth_requests import LoginRequest, RegisterRequest
from .task_requests import CreateTaskRequest, UpdateTaskRequest

__all__ = [
    "CreateTaskRequest",
    "UpdateTaskRequest",
    "LoginRequest",
    "RegisterRequest",
]
