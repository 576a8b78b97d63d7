"""
SQLAlchemy implementation of ITaskRepository.
"""

from typing import Any, Optional

from sqlalchemy import and_
from sqlalchemy.orm import Session as DBSession

from ..shared.utils import now_epoch_ms
from ..shared.utils.types import TaskId, UserId
from .entities.task import MUTABLE_TASK_FIELDS, Task, TaskPriority
from .interfaces import ITaskRepository
from .models.task_model import TaskModel


class TaskRepository(ITaskRepository):
    """SQLAlchemy implementation of task repository."""

    @staticmethod
    def _owned(task_id: TaskId, user_id: UserId):
        return and_(TaskModel.id == task_id, TaskModel.user_id == user_id)

    def create(self, db: DBSession, task: Task) -> Task:
        """Persist a new task."""
        model = TaskModel(
            id=task.id,
            user_id=task.user_id,
            title=task.title,
            description=task.description,
            priority=task.priority.value,
            due_date=task.due_date,
            completed=task.completed,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )
        db.add(model)
        db.flush()
        return self._model_to_entity(model)

    def find_by_user(self, db: DBSession, user_id: UserId) -> list[Task]:
        """Find all tasks owned by a user, newest first."""
        models = (
            db.query(TaskModel)
            .filter(TaskModel.user_id == user_id)
            .order_by(TaskModel.created_at.desc(), TaskModel.seq.desc())
            .all()
        )
        return [self._model_to_entity(model) for model in models]

    def find_user_task(self, db: DBSession, task_id: TaskId, user_id: UserId) -> Optional[Task]:
        """Find a specific task belonging to a user."""
        model = db.query(TaskModel).filter(self._owned(task_id, user_id)).first()
        return self._model_to_entity(model) if model else None

    def update(
        self, db: DBSession, task_id: TaskId, user_id: UserId, changes: dict[str, Any]
    ) -> Optional[Task]:
        """
        Apply changes to a task belonging to a user.

        Runs a single UPDATE whose WHERE clause carries both id and owner,
        so a task owned by someone else is never touched. Keys outside the
        mutable whitelist are dropped; updated_at is always refreshed.
        """
        values: dict[Any, Any] = {}
        for field, value in changes.items():
            if field not in MUTABLE_TASK_FIELDS:
                continue
            if isinstance(value, TaskPriority):
                value = value.value
            values[getattr(TaskModel, field)] = value
        values[TaskModel.updated_at] = now_epoch_ms()

        updated_count = (
            db.query(TaskModel)
            .filter(self._owned(task_id, user_id))
            .update(values, synchronize_session="fetch")
        )
        if updated_count == 0:
            return None

        db.flush()
        return self.find_user_task(db, task_id, user_id)

    def delete(self, db: DBSession, task_id: TaskId, user_id: UserId) -> bool:
        """Delete a task belonging to a user."""
        deleted_count = (
            db.query(TaskModel)
            .filter(self._owned(task_id, user_id))
            .delete(synchronize_session="fetch")
        )
        return deleted_count > 0

    def _model_to_entity(self, model: TaskModel) -> Task:
        """Convert SQLAlchemy model to domain entity."""
        return Task(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            description=model.description,
            priority=TaskPriority(model.priority),
            due_date=model.due_date,
            completed=model.completed,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
