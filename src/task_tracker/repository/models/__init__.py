"""
SQLAlchemy models for database persistence.
"""

from .base import Base
from .task_model import TaskModel
from .user_model import UserModel

__all__ = [
    "Base",
    "TaskModel",
    "UserModel",
]
