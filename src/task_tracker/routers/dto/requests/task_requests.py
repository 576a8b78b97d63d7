"""
Request DTOs for task-related API endpoints.

Unknown keys (including ``id``, ``ownerId`` and timestamps) are ignored,
so clients cannot set system-managed fields.
"""

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from ....repository.entities.task import TaskPriority

TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 5000


class CreateTaskRequest(BaseModel):
    """Request to create a new task."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Emptiness is checked by the service so that it reports a ValidationError.
    title: Optional[str] = Field(None, max_length=TITLE_MAX_LENGTH, description="Task title")
    description: Optional[str] = Field(
        None, max_length=DESCRIPTION_MAX_LENGTH, description="Task description"
    )
    due_date: Optional[date] = Field(None, alias="dueDate", description="Due date (YYYY-MM-DD)")
    priority: Optional[TaskPriority] = Field(None, description="high, medium or low")


class UpdateTaskRequest(BaseModel):
    """
    Request to partially update a task.

    Only the keys actually sent are applied; see ``changes()``.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: Optional[str] = Field(None, max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    due_date: Optional[date] = Field(None, alias="dueDate")
    priority: Optional[TaskPriority] = None
    completed: Optional[StrictBool] = None

    def changes(self) -> dict[str, Any]:
        """Fields present in the request body, keyed by entity field name."""
        return self.model_dump(exclude_unset=True)
