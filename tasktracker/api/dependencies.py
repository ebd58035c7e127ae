"""FastAPI dependencies wiring the shared engine into per-request services."""

from collections.abc import Generator

from fastapi import Depends, Request
from sqlmodel import Session

from ..database import get_session_context
from ..services import TaskService


def get_session(request: Request) -> Generator[Session, None, None]:
    """Open a session on the application's engine for one request."""
    with get_session_context(request.app.state.engine) as session:
        yield session


def get_task_service(session: Session = Depends(get_session)) -> TaskService:
    """Build the task service for one request."""
    return TaskService(session)
