"""Service layer for task business logic and persistence."""

from .task_service import TaskService

__all__ = ["TaskService"]
