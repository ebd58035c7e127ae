"""Repository layer bridging the task service with database persistence."""

from .base import BaseRepository
from .task_repository import TaskRepository


__all__ = ["BaseRepository", "TaskRepository"]
