"""Task service: validation, one store operation per call, outcome mapping.

Each operation either returns its result or raises a ``TaskServiceError``
subclass whose ``status_code`` names the HTTP status it maps to.
"""

import logging

from pydantic import ValidationError
from sqlmodel import Session

from ..errors import TaskNotFoundError, TaskStoreError, TaskValidationError
from ..repositories import TaskRepository
from ..schemas.database import TaskRecord
from ..schemas.models import TaskRead, is_task_id


logger = logging.getLogger(__name__)


class TaskService:
    """High-level task operations over an injected store session."""

    def __init__(self, session: Session):
        """Initialize task service with a database session.

        Args:
            session: SQLModel session opened on the shared engine.

        """
        self.session = session
        self.task_repo = TaskRepository(session)

    @staticmethod
    def parse_task_id(task_id: str) -> str:
        """Parse a caller-supplied identifier into the store's native format.

        Raises:
            TaskValidationError: If the identifier is not 32 lowercase hex digits

        """
        if not is_task_id(task_id):
            raise TaskValidationError(f"Invalid task id: {task_id!r}")
        return task_id

    def list_tasks(self) -> list[TaskRead]:
        """Return every task in store-native order."""
        try:
            records = self.task_repo.find_all()
        except TaskStoreError as e:
            logger.error(f"Error fetching tasks: {e}")
            raise

        tasks = []
        for record in records:
            try:
                tasks.append(record.to_read_model())
            except ValidationError as e:
                logger.error(f"Error decoding task: {e}")
                raise TaskStoreError(str(e)) from e
        return tasks

    def create_task(self, description: str | None) -> TaskRead:
        """Create a new, incomplete task.

        The description is stored as given; only an empty value is rejected.
        """
        if not description:
            raise TaskValidationError("Task description is required")

        record = TaskRecord(description=description, completed=False)
        task = record.to_read_model()
        try:
            self.task_repo.insert_one(record)
        except TaskStoreError as e:
            logger.error(f"Error inserting task: {e}")
            raise

        logger.info(f"Created task {task.id}")
        return task

    def delete_task(self, task_id: str) -> None:
        """Delete a task.

        Raises:
            TaskNotFoundError: If no record matched the identifier

        """
        task_id = self.parse_task_id(task_id)
        try:
            deleted = self.task_repo.delete_by_id(task_id)
        except TaskStoreError as e:
            logger.error(f"Error deleting task: {e}")
            raise

        if deleted == 0:
            raise TaskNotFoundError("Task not found")
        logger.info(f"Deleted task {task_id}")

    def complete_task(self, task_id: str) -> None:
        """Mark a task completed.

        Idempotent, and an unknown identifier is not reported.
        """
        task_id = self.parse_task_id(task_id)
        try:
            matched = self.task_repo.mark_completed(task_id)
        except TaskStoreError as e:
            logger.error(f"Error completing task: {e}")
            raise

        logger.info(f"Completed task {task_id} (matched={matched})")

    def close(self):
        """Close the database session."""
        if self.session:
            self.session.close()
