"""Business models for the task tracker.

Pydantic models used at the service and HTTP boundaries, kept separate from
the SQLModel table definitions in ``schemas.database``.
"""

import re
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


TASK_ID_LENGTH = 32
TASK_ID_PATTERN = re.compile(rf"^[0-9a-f]{{{TASK_ID_LENGTH}}}$")


class UnifiedConfig:
    """Shared pydantic configuration for business models."""

    PYDANTIC_CONFIG = ConfigDict(
        strict=True,
        extra="forbid",
        validate_assignment=True,
        frozen=False,
        from_attributes=True,
    )


class BaseBusinessModel(BaseModel):
    """Base for business models with the shared configuration."""

    model_config = UnifiedConfig.PYDANTIC_CONFIG


def new_task_id() -> str:
    """Generate a fresh task identifier as 32 lowercase hex characters."""
    return uuid4().hex


def is_task_id(value: str) -> bool:
    """Check whether a string is in the store's native identifier format."""
    return TASK_ID_PATTERN.fullmatch(value) is not None


class TaskRead(BaseBusinessModel):
    """External representation of a task.

    Serialises to ``{"id": <hex>, "description": <str>, "completed": <bool>}``.
    """

    id: str = Field(..., pattern=TASK_ID_PATTERN.pattern)
    description: str = Field(..., min_length=1)
    completed: bool = False
