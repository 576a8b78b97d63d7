"""
Domain entities for the repository layer.
"""

from .task import MUTABLE_TASK_FIELDS, Task, TaskPriority
from .user import User

__all__ = ["MUTABLE_TASK_FIELDS", "Task", "TaskPriority", "User"]
