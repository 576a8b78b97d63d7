"""
Task-related response DTOs.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ....repository.entities.task import Task, TaskPriority
from ....shared.utils import epoch_ms_to_iso8601


class TaskResponse(BaseModel):
    """
    Response DTO for a task.

    Timestamps are stored as epoch milliseconds and rendered here as
    ISO-8601 UTC strings.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    owner_id: str = Field(alias="ownerId")
    title: str
    description: Optional[str] = None
    priority: TaskPriority
    due_date: Optional[date] = Field(default=None, alias="dueDate")
    completed: bool
    created_at: str = Field(alias="createdAt")
    updated_at: str = Field(alias="updatedAt")

    @classmethod
    def from_entity(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            owner_id=task.user_id,
            title=task.title,
            description=task.description,
            priority=task.priority,
            due_date=task.due_date,
            completed=task.completed,
            created_at=epoch_ms_to_iso8601(task.created_at),
            updated_at=epoch_ms_to_iso8601(task.updated_at),
        )


class DeleteTaskResponse(BaseModel):
    """Confirmation returned after a delete."""

    message: str = "Task deleted"
