"""Integration tests for the task HTTP API.

Exercises the FastAPI application end to end over an in-memory store.
"""

from typing import NoReturn, get_type_hints
from unittest.mock import Mock

import pytest
from fastapi import HTTPException
from sqlmodel import select

from tasktracker.api.dependencies import get_task_service
from tasktracker.api.routes import _raise_http
from tasktracker.errors import TaskNotFoundError, TaskStoreError, TaskValidationError
from tasktracker.schemas.database import TaskRecord
from tasktracker.services import TaskService


pytestmark = pytest.mark.integration


def _create(client, description="buy milk"):
    response = client.post("/tasks", data={"description": description})
    assert response.status_code == 201
    return next(t for t in client.get("/tasks").json() if t["description"] == description)


@pytest.fixture
def failing_service(app):
    """Replace the task service with one whose store is down."""
    service = Mock(spec=TaskService)
    error = TaskStoreError("connection refused")
    service.list_tasks.side_effect = error
    service.create_task.side_effect = error
    service.delete_task.side_effect = error
    service.complete_task.side_effect = error
    app.dependency_overrides[get_task_service] = lambda: service
    yield service
    app.dependency_overrides.clear()


class TestHomePage:
    """Test the static home page."""

    def test_renders_index(self, client):
        """Test GET / serves the HTML page."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "<h1>Tasks</h1>" in response.text


class TestListTasks:
    """Test GET /tasks."""

    def test_empty_list(self, client):
        """Test an empty store yields a JSON empty array."""
        response = client.get("/tasks")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == []

    def test_task_shape(self, client):
        """Test listed tasks have exactly id, description and completed."""
        task = _create(client)

        assert set(task) == {"id", "description", "completed"}
        assert task["description"] == "buy milk"
        assert task["completed"] is False
        assert len(task["id"]) == 32
        int(task["id"], 16)

    def test_store_error(self, client, failing_service):
        """Test a store failure yields 500 with the raw message."""
        response = client.get("/tasks")

        assert response.status_code == 500
        assert response.json() == {"detail": "connection refused"}


class TestCreateTask:
    """Test POST /tasks."""

    def test_created_with_empty_body(self, client):
        """Test creation answers 201 with no body."""
        response = client.post("/tasks", data={"description": "buy milk"})

        assert response.status_code == 201
        assert response.content == b""

    @pytest.mark.parametrize("data", [{"description": ""}, {}])
    def test_empty_description_rejected(self, client, session, data):
        """Test an empty or missing description is a 400 and persists nothing."""
        response = client.post("/tasks", data=data)

        assert response.status_code == 400
        assert response.json() == {"detail": "Task description is required"}
        assert session.exec(select(TaskRecord)).all() == []

    def test_whitespace_description_accepted(self, client):
        """Test a whitespace-only description is stored as-is."""
        task = _create(client, "   ")

        assert task["description"] == "   "

    def test_descriptions_round_trip(self, client, sample_descriptions):
        """Test every non-empty description is listed back incomplete."""
        for description in sample_descriptions:
            assert client.post("/tasks", data={"description": description}).status_code == 201

        listed = {t["description"]: t for t in client.get("/tasks").json()}
        for description in sample_descriptions:
            assert listed[description]["completed"] is False

    def test_store_error(self, client, failing_service):
        """Test an insert failure yields 500."""
        response = client.post("/tasks", data={"description": "buy milk"})

        assert response.status_code == 500
        assert response.json() == {"detail": "connection refused"}


class TestDeleteTask:
    """Test DELETE /tasks/{id}."""

    def test_delete_existing(self, client):
        """Test deleting a task answers 200 and removes it."""
        task = _create(client)

        response = client.delete(f"/tasks/{task['id']}")

        assert response.status_code == 200
        assert response.content == b""
        assert client.get("/tasks").json() == []

    def test_delete_missing(self, client):
        """Test deleting an unknown id answers 404."""
        response = client.delete(f"/tasks/{'0' * 32}")

        assert response.status_code == 404
        assert response.json() == {"detail": "Task not found"}

    @pytest.mark.parametrize("task_id", ["xyz", "abc", "0" * 31 + "g", "A" * 32])
    def test_malformed_id(self, client, task_id):
        """Test malformed ids answer 400 and leave the store untouched."""
        task = _create(client)

        response = client.delete(f"/tasks/{task_id}")

        assert response.status_code == 400
        assert [t["id"] for t in client.get("/tasks").json()] == [task["id"]]

    def test_store_error(self, client, failing_service):
        """Test a delete failure yields 500."""
        response = client.delete(f"/tasks/{'a' * 32}")

        assert response.status_code == 500


class TestCompleteTask:
    """Test PUT /tasks/{id}."""

    def test_complete_existing(self, client):
        """Test completing a task answers 200 and flips the flag."""
        task = _create(client)

        response = client.put(f"/tasks/{task['id']}")

        assert response.status_code == 200
        assert response.content == b""
        assert client.get("/tasks").json()[0]["completed"] is True

    def test_complete_twice(self, client):
        """Test completing twice is idempotent."""
        task = _create(client)

        assert client.put(f"/tasks/{task['id']}").status_code == 200
        assert client.put(f"/tasks/{task['id']}").status_code == 200
        assert client.get("/tasks").json() == [{**task, "completed": True}]

    def test_complete_unknown_id(self, client):
        """Test an unknown id is not distinguished from success."""
        response = client.put(f"/tasks/{'0' * 32}")

        assert response.status_code == 200
        assert client.get("/tasks").json() == []

    @pytest.mark.parametrize("task_id", ["xyz", "12345", "z" * 32])
    def test_malformed_id(self, client, task_id):
        """Test malformed ids answer 400 and leave the store untouched."""
        task = _create(client)

        response = client.put(f"/tasks/{task_id}")

        assert response.status_code == 400
        assert client.get("/tasks").json() == [task]

    def test_store_error(self, client, failing_service):
        """Test an update failure yields 500."""
        response = client.put(f"/tasks/{'a' * 32}")

        assert response.status_code == 500
        assert response.json() == {"detail": "connection refused"}


class TestErrorMapping:
    """Test translation of service errors into HTTP errors."""

    @pytest.mark.parametrize(
        ("error", "status_code"),
        [
            (TaskValidationError("Invalid task id: 'x'"), 400),
            (TaskNotFoundError("Task not found"), 404),
            (TaskStoreError("connection refused"), 500),
        ],
    )
    def test_raises_http_exception(self, error, status_code):
        """Test each service error maps to its status and message."""
        with pytest.raises(HTTPException) as exc_info:
            _raise_http(error)

        assert exc_info.value.status_code == status_code
        assert exc_info.value.detail == error.message
        assert exc_info.value.__cause__ is error

    def test_declared_as_never_returning(self):
        """Test the helper is annotated as never returning."""
        assert get_type_hints(_raise_http)["return"] is NoReturn
