"""
Repository layer containing all data access logic organized by entity type.
"""

# Interfaces
from .interfaces import ITaskRepository, IUserRepository

# Entities (re-exported for convenience)
from .entities import Task, TaskPriority, User

# Models (re-exported for convenience)
from .models import Base, TaskModel, UserModel

# Implementations
from .task_repository import TaskRepository
from .user_repository import UserRepository

__all__ = [
    # Interfaces
    "ITaskRepository",
    "IUserRepository",
    # Implementations
    "TaskRepository",
    "UserRepository",
    # Entities
    "Task",
    "TaskPriority",
    "User",
    # Models
    "Base",
    "TaskModel",
    "UserModel",
]
