"""Schema package for the task tracker.

Quick usage:
    from tasktracker.schemas import TaskRead, TaskRecord
"""

from .database import TaskRecord
from .models import (
    TASK_ID_LENGTH,
    BaseBusinessModel,
    TaskRead,
    is_task_id,
    new_task_id,
)

__all__ = [
    "TASK_ID_LENGTH",
    "BaseBusinessModel",
    "TaskRead",
    "TaskRecord",
    "is_task_id",
    "new_task_id",
]
