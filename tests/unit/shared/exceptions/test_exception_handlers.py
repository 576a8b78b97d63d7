"""
Unit tests for the exception types and their FastAPI handlers.
"""

import json
from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.testclient import TestClient

from task_tracker.shared.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    EntityOperation,
    InternalServiceError,
    InvalidTokenError,
    TaskTrackerException,
    UnauthenticatedError,
    ValidationError,
)
from task_tracker.shared.exceptions.exception_handlers import (
    generic_exception_handler,
    internal_service_error_handler,
    register_exception_handlers,
    request_validation_error_handler,
    task_tracker_exception_handler,
)


class TestExceptionTypes:
    @pytest.mark.parametrize(
        "exc,expected_status",
        [
            (ValidationError("bad"), 400),
            (UnauthenticatedError(), 401),
            (InvalidTokenError(), 403),
            (EntityNotFoundError("Task", "t1"), 404),
            (DuplicateEntityError("User", "email"), 409),
            (InternalServiceError(), 500),
        ],
    )
    def test_status_codes(self, exc, expected_status):
        assert isinstance(exc, TaskTrackerException)
        assert exc.status_code == expected_status

    def test_default_messages(self):
        assert UnauthenticatedError().message == "No token provided"
        assert InvalidTokenError().message == "Invalid token"
        assert InternalServiceError().message == "An unexpected error occurred"

    def test_not_found_message_does_not_leak_id(self):
        error = EntityNotFoundError("Task", "secret-id", EntityOperation.DELETE)

        assert error.message == "Task not found"
        assert "secret-id" not in str(error)
        assert error.operation == EntityOperation.DELETE

    def test_validation_error_for_field(self):
        error = ValidationError.for_field("title", "Title is required")

        assert error.message == "Title is required"
        assert error.validation_details == {"title": ["Title is required"]}


class TestHandlers:
    @pytest.fixture
    def mock_request(self):
        request = MagicMock()
        request.url.path = "/api/v1/tasks"
        request.method = "POST"
        return request

    @pytest.mark.asyncio
    async def test_validation_error_body(self, mock_request):
        exc = ValidationError.for_field("title", "Title is required")

        response = await task_tracker_exception_handler(mock_request, exc)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = json.loads(response.body)
        assert body == {
            "message": "Title is required",
            "error": "ValidationError",
            "validationDetails": {"title": ["Title is required"]},
        }

    @pytest.mark.asyncio
    async def test_not_found_body(self, mock_request):
        response = await task_tracker_exception_handler(
            mock_request, EntityNotFoundError("Task", "t1")
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        body = json.loads(response.body)
        assert body["message"] == "Task not found"
        assert "validationDetails" not in body

    @pytest.mark.asyncio
    async def test_internal_error_hides_details(self, mock_request):
        exc = InternalServiceError("connection to db-host:5432 refused")

        with patch(
            "task_tracker.shared.exceptions.exception_handlers.log"
        ) as mock_log:
            response = await internal_service_error_handler(mock_request, exc)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        body = json.loads(response.body)
        assert body["message"] == "An unexpected error occurred"
        assert "db-host" not in response.body.decode()
        mock_log.error.assert_called_once()

    @pytest.mark.asyncio
    async def test_generic_exception_is_logged_and_masked(self, mock_request):
        with patch(
            "task_tracker.shared.exceptions.exception_handlers.log"
        ) as mock_log:
            response = await generic_exception_handler(
                mock_request, RuntimeError("disk on fire")
            )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert "disk on fire" not in response.body.decode()
        mock_log.exception.assert_called_once()

    @pytest.mark.asyncio
    async def test_request_validation_error_maps_to_400(self, mock_request):
        exc = RequestValidationError(
            [
                {
                    "type": "enum",
                    "loc": ("body", "priority"),
                    "msg": "Input should be 'high', 'medium' or 'low'",
                    "input": "urgent",
                }
            ]
        )

        response = await request_validation_error_handler(mock_request, exc)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = json.loads(response.body)
        assert body["error"] == "ValidationError"
        assert "priority" in body["validationDetails"]


class TestRegisteredHandlers:
    @pytest.fixture
    def client(self):
        app = FastAPI()
        register_exception_handlers(app)

        @app.get("/duplicate")
        def duplicate():
            raise DuplicateEntityError("User", "email")

        @app.get("/unauthenticated")
        def unauthenticated():
            raise UnauthenticatedError()

        @app.get("/boom")
        def boom():
            raise RuntimeError("unexpected")

        return TestClient(app, raise_server_exceptions=False)

    def test_duplicate_maps_to_409(self, client):
        response = client.get("/duplicate")

        assert response.status_code == 409
        assert response.json()["error"] == "DuplicateEntityError"

    def test_unauthenticated_maps_to_401(self, client):
        response = client.get("/unauthenticated")

        assert response.status_code == 401
        assert response.json()["message"] == "No token provided"

    def test_unexpected_exception_maps_to_500(self, client):
        response = client.get("/boom")

        assert response.status_code == 500
        assert response.json()["error"] == "InternalServiceError"
