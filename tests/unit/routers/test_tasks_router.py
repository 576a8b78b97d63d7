"""
Unit tests for the task router functions with mocked services.
"""

from unittest.mock import MagicMock

import pytest

from task_tracker.repository.entities.task import Task, TaskPriority
from task_tracker.routers import tasks as tasks_router
from task_tracker.routers.dto.requests.task_requests import (
    CreateTaskRequest,
    UpdateTaskRequest,
)
from task_tracker.shared.exceptions import EntityNotFoundError

USER = {"id": "user-1"}


def _task(**overrides) -> Task:
    data = dict(
        id="task-1",
        user_id="user-1",
        title="Buy milk",
        priority=TaskPriority.HIGH,
        created_at=0,
        updated_at=0,
    )
    data.update(overrides)
    return Task(**data)


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def mock_service():
    return MagicMock()


def test_create_passes_caller_and_commits(mock_db, mock_service):
    mock_service.create_task.return_value = _task()
    request = CreateTaskRequest.model_validate({"title": "Buy milk", "priority": "high"})

    response = tasks_router.create_task(request, USER, mock_db, mock_service)

    mock_service.create_task.assert_called_once_with(
        mock_db,
        user_id="user-1",
        title="Buy milk",
        description=None,
        due_date=None,
        priority=TaskPriority.HIGH,
    )
    mock_db.commit.assert_called_once()
    assert response.owner_id == "user-1"


def test_list_maps_entities(mock_db, mock_service):
    mock_service.list_tasks.return_value = [_task(id="b"), _task(id="a")]

    response = tasks_router.get_tasks(USER, mock_db, mock_service)

    assert [t.id for t in response] == ["b", "a"]
    mock_service.list_tasks.assert_called_once_with(mock_db, "user-1")


def test_update_forwards_only_sent_fields(mock_db, mock_service):
    mock_service.update_task.return_value = _task(completed=True)
    request = UpdateTaskRequest.model_validate({"completed": True, "ownerId": "other"})

    response = tasks_router.update_task("task-1", request, USER, mock_db, mock_service)

    mock_service.update_task.assert_called_once_with(
        mock_db, "user-1", "task-1", {"completed": True}
    )
    assert response.completed is True


def test_delete_not_found_propagates_without_commit(mock_db, mock_service):
    mock_service.delete_task.side_effect = EntityNotFoundError("Task", "task-1")

    with pytest.raises(EntityNotFoundError):
        tasks_router.delete_task("task-1", USER, mock_db, mock_service)

    mock_db.commit.assert_not_called()


def test_delete_returns_confirmation(mock_db, mock_service):
    response = tasks_router.delete_task("task-1", USER, mock_db, mock_service)

    assert response.message == "Task deleted"
    mock_db.commit.assert_called_once()
