"""SQLModel table definitions for task persistence."""

from sqlmodel import Field, SQLModel

from .models import TASK_ID_LENGTH, TaskRead, new_task_id


class TaskRecord(SQLModel, table=True):
    """Persisted task document.

    The primary key is the externally visible hex identifier, generated by the
    service at insert time and never changed afterwards.
    """

    __tablename__ = "tasks"

    id: str = Field(
        default_factory=new_task_id,
        primary_key=True,
        min_length=TASK_ID_LENGTH,
        max_length=TASK_ID_LENGTH,
    )
    description: str = Field(min_length=1)
    completed: bool = Field(default=False)

    def to_read_model(self) -> TaskRead:
        """Convert to the TaskRead business model."""
        return TaskRead.model_validate(
            {
                "id": self.id,
                "description": self.description,
                "completed": self.completed,
            }
        )
