"""Task routes."""

from typing import NoReturn

from fastapi import APIRouter, Depends, Form, HTTPException, Request, Response
from fastapi.responses import HTMLResponse

from ..errors import TaskServiceError
from ..schemas.models import TaskRead
from ..services import TaskService
from .dependencies import get_task_service

router = APIRouter(tags=["tasks"])


def _raise_http(error: TaskServiceError) -> NoReturn:
    raise HTTPException(status_code=error.status_code, detail=error.message) from error


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def home(request: Request) -> HTMLResponse:
    """Serve the static home page."""
    return request.app.state.templates.TemplateResponse(request, "index.html")


@router.get("/tasks", response_model=list[TaskRead])
def list_tasks(service: TaskService = Depends(get_task_service)) -> list[TaskRead]:
    """List all tasks."""
    try:
        return service.list_tasks()
    except TaskServiceError as e:
        _raise_http(e)


@router.post("/tasks", status_code=201)
def add_task(
    description: str | None = Form(None),
    service: TaskService = Depends(get_task_service),
) -> Response:
    """Add a new task from the form-encoded ``description`` field."""
    try:
        service.create_task(description)
    except TaskServiceError as e:
        _raise_http(e)
    return Response(status_code=201)


@router.delete("/tasks/{task_id}")
def delete_task(
    task_id: str, service: TaskService = Depends(get_task_service)
) -> Response:
    """Delete a task."""
    try:
        service.delete_task(task_id)
    except TaskServiceError as e:
        _raise_http(e)
    return Response(status_code=200)


@router.put("/tasks/{task_id}")
def complete_task(
    task_id: str, service: TaskService = Depends(get_task_service)
) -> Response:
    """Mark a task as completed."""
    try:
        service.complete_task(task_id)
    except TaskServiceError as e:
        _raise_http(e)
    return Response(status_code=200)
