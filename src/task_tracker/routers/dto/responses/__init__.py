"""
Response DTOs for API endpoints.
"""

from .auth_responses import LoginResponse, UserResponse
from .task_responses import DeleteTaskResponse, TaskResponse

__all__ = [
    "TaskResponse",
    "DeleteTaskResponse",
    "LoginResponse",
    "UserResponse",
]
