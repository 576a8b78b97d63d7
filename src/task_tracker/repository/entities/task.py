"""
Task domain entity.
"""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class TaskPriority(str, Enum):
    """Allowed task priorities."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# Fields a client may change after creation. Everything else is system managed.
MUTABLE_TASK_FIELDS = frozenset({"title", "description", "priority", "due_date", "completed"})


class Task(BaseModel):
    """Task domain entity."""

    id: str
    user_id: str
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[date] = None
    completed: bool = False
    created_at: int
    updated_at: int
