"""Task repository: the collection of persisted task documents."""

from ..schemas.database import TaskRecord
from .base import BaseRepository


class TaskRepository(BaseRepository[TaskRecord]):
    """Repository for task records."""

    def get_entity_class(self) -> type[TaskRecord]:
        """Return the database entity class for this repository."""
        return TaskRecord

    def mark_completed(self, task_id: str) -> int:
        """Set ``completed`` on the matching record.

        Returns the number of matched records; callers decide whether zero
        matters.
        """
        return self.update_by_id(task_id, {"completed": True})
