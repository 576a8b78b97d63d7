"""
Repository interfaces defining contracts for data access.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from sqlalchemy.orm import Session as DBSession

from ..shared.utils.types import TaskId, UserId
from .entities import Task, User


class ITaskRepository(ABC):
    """
    Interface for task data access operations.

    Every lookup is owner-scoped: the user id is part of the query
    predicate, never checked after the fact.
    """

    @abstractmethod
    def create(self, db: DBSession, task: Task) -> Task:
        """Persist a new task."""
        pass

    @abstractmethod
    def find_by_user(self, db: DBSession, user_id: UserId) -> list[Task]:
        """Find all tasks owned by a user, newest first."""
        pass

    @abstractmethod
    def find_user_task(self, db: DBSession, task_id: TaskId, user_id: UserId) -> Optional[Task]:
        """Find a specific task belonging to a user."""
        pass

    @abstractmethod
    def update(
        self, db: DBSession, task_id: TaskId, user_id: UserId, changes: dict[str, Any]
    ) -> Optional[Task]:
        """Apply changes to a task belonging to a user."""
        pass

    @abstractmethod
    def delete(self, db: DBSession, task_id: TaskId, user_id: UserId) -> bool:
        """Delete a task belonging to a user."""
        pass


class IUserRepository(ABC):
    """Interface for user account data access operations."""

    @abstractmethod
    def create(self, db: DBSession, user: User) -> User:
        """Persist a new user."""
        pass

    @abstractmethod
    def find_by_email(self, db: DBSession, email: str) -> Optional[User]:
        """Find a user by normalised email."""
        pass

    @abstractmethod
    def find_by_id(self, db: DBSession, user_id: UserId) -> Optional[User]:
        """Find a user by id."""
        pass
