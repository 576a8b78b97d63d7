"""
Task API controller.

Every route depends on ``get_current_user``, so the token check runs
before the service is reached. Business exceptions propagate to the
shared exception handlers, which map them to status codes.
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session as DBSession

from ..dependencies import get_db, get_task_service
from ..services.task_service import TaskService
from ..shared.api import get_current_user
from .dto.requests.task_requests import CreateTaskRequest, UpdateTaskRequest
from .dto.responses.task_responses import DeleteTaskResponse, TaskResponse

log = logging.getLogger(__name__)

router = APIRouter()


@router.post("/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    request: CreateTaskRequest,
    user: dict = Depends(get_current_user),
    db: DBSession = Depends(get_db),
    task_service: TaskService = Depends(get_task_service),
):
    """Create a new task for the authenticated user."""
    user_id = user.get("id")
    task = task_service.create_task(
        db,
        user_id=user_id,
        title=request.title,
        description=request.description,
        due_date=request.due_date,
        priority=request.priority,
    )
    db.commit()
    return TaskResponse.from_entity(task)


@router.get("/tasks", response_model=list[TaskResponse])
def get_tasks(
    user: dict = Depends(get_current_user),
    db: DBSession = Depends(get_db),
    task_service: TaskService = Depends(get_task_service),
):
    """Get all tasks owned by the authenticated user, newest first."""
    user_id = user.get("id")
    tasks = task_service.list_tasks(db, user_id)
    log.debug("Returning %d tasks for user %s", len(tasks), user_id)
    return [TaskResponse.from_entity(task) for task in tasks]


@router.get("/tasks/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: str,
    user: dict = Depends(get_current_user),
    db: DBSession = Depends(get_db),
    task_service: TaskService = Depends(get_task_service),
):
    """Get a specific task by ID."""
    task = task_service.get_task(db, user.get("id"), task_id)
    return TaskResponse.from_entity(task)


@router.put("/tasks/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: str,
    request: UpdateTaskRequest,
    user: dict = Depends(get_current_user),
    db: DBSession = Depends(get_db),
    task_service: TaskService = Depends(get_task_service),
):
    """Apply a partial update to a task."""
    task = task_service.update_task(db, user.get("id"), task_id, request.changes())
    db.commit()
    return TaskResponse.from_entity(task)


@router.delete("/tasks/{task_id}", response_model=DeleteTaskResponse)
def delete_task(
    task_id: str,
    user: dict = Depends(get_current_user),
    db: DBSession = Depends(get_db),
    task_service: TaskService = Depends(get_task_service),
):
    """Delete a task."""
    task_service.delete_task(db, user.get("id"), task_id)
    db.commit()
    return DeleteTaskResponse()
