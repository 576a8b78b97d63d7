"""
Service layer for task operations.

Every operation takes the verified caller id and passes it down to the
repository, which scopes its queries by owner. A task owned by another
user is reported exactly like a missing one.
"""

import logging
import uuid
from datetime import date
from typing import Any, Optional, Union

from sqlalchemy.orm import Session as DBSession

from ..repository.entities.task import MUTABLE_TASK_FIELDS, Task, TaskPriority
from ..repository.interfaces import ITaskRepository
from ..shared.exceptions import (
    EntityNotFoundError,
    EntityOperation,
    UnauthenticatedError,
    ValidationError,
)
from ..shared.utils import now_epoch_ms
from ..shared.utils.types import TaskId, UserId

log = logging.getLogger(__name__)

TASK_ENTITY = "Task"


class TaskService:
    """Ownership-enforcing CRUD over the task store."""

    def __init__(self, task_repository: ITaskRepository):
        self.task_repository = task_repository

    def create_task(
        self,
        db: DBSession,
        user_id: UserId,
        title: Optional[str],
        description: Optional[str] = None,
        due_date: Optional[date] = None,
        priority: Union[TaskPriority, str, None] = None,
    ) -> Task:
        """Create a new task owned by the caller."""
        self._require_user(user_id)
        self._validate_title(title)

        now_ms = now_epoch_ms()
        task = Task(
            id=str(uuid.uuid4()),
            user_id=user_id,
            title=title,
            description=description,
            priority=self._validate_priority(priority) if priority is not None else TaskPriority.MEDIUM,
            due_date=due_date,
            completed=False,
            created_at=now_ms,
            updated_at=now_ms,
        )
        saved = self.task_repository.create(db, task)
        log.info("Created task %s for user %s", saved.id, user_id)
        return saved

    def list_tasks(self, db: DBSession, user_id: UserId) -> list[Task]:
        """Get all tasks owned by the caller, newest first."""
        self._require_user(user_id)
        return self.task_repository.find_by_user(db, user_id)

    def get_task(self, db: DBSession, user_id: UserId, task_id: TaskId) -> Task:
        """Get one task owned by the caller."""
        self._require_user(user_id)
        task = self.task_repository.find_user_task(db, task_id, user_id)
        if task is None:
            log.debug("Task %s not found for user %s", task_id, user_id)
            raise EntityNotFoundError(TASK_ENTITY, task_id, EntityOperation.READ)
        return task

    def update_task(
        self, db: DBSession, user_id: UserId, task_id: TaskId, changes: dict[str, Any]
    ) -> Task:
        """
        Apply a partial update to a task owned by the caller.

        Only whitelisted fields present in ``changes`` are written; id,
        owner and creation time can never be altered this way.
        """
        self._require_user(user_id)
        clean_changes = self._validate_changes(changes)

        task = self.task_repository.update(db, task_id, user_id, clean_changes)
        if task is None:
            log.debug("Task %s not found for update by user %s", task_id, user_id)
            raise EntityNotFoundError(TASK_ENTITY, task_id, EntityOperation.UPDATE)

        log.info(
            "Updated task %s for user %s (fields: %s)",
            task_id,
            user_id,
            ", ".join(sorted(clean_changes)) or "none",
        )
        return task

    def delete_task(self, db: DBSession, user_id: UserId, task_id: TaskId) -> None:
        """Delete a task owned by the caller."""
        self._require_user(user_id)
        deleted = self.task_repository.delete(db, task_id, user_id)
        if not deleted:
            log.debug("Task %s not found for delete by user %s", task_id, user_id)
            raise EntityNotFoundError(TASK_ENTITY, task_id, EntityOperation.DELETE)
        log.info("Deleted task %s for user %s", task_id, user_id)

    def _validate_changes(self, changes: dict[str, Any]) -> dict[str, Any]:
        clean: dict[str, Any] = {}
        for field, value in changes.items():
            if field not in MUTABLE_TASK_FIELDS:
                continue
            if field == "title":
                value = self._validate_title(value)
            elif field == "priority":
                if value is None:
                    raise ValidationError.for_field("priority", "Priority cannot be null")
                value = self._validate_priority(value)
            elif field == "completed" and value is None:
                raise ValidationError.for_field("completed", "Completed cannot be null")
            clean[field] = value
        return clean

    @staticmethod
    def _validate_title(title: Optional[str]) -> str:
        if title is None or not title.strip():
            raise ValidationError.for_field("title", "Title is required")
        return title

    @staticmethod
    def _validate_priority(priority: Union[TaskPriority, str]) -> TaskPriority:
        try:
            return TaskPriority(priority)
        except ValueError:
            allowed = ", ".join(p.value for p in TaskPriority)
            raise ValidationError.for_field("priority", f"Priority must be one of: {allowed}")

    @staticmethod
    def _require_user(user_id: Optional[UserId]) -> None:
        if not user_id or not user_id.strip():
            raise UnauthenticatedError("Authenticated user is required")
