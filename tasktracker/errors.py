"""Error taxonomy shared by the task store, the service and the HTTP layer."""


class TaskServiceError(Exception):
    """Base error for task operations.

    ``status_code`` is the HTTP status the error maps to at the API boundary.
    """

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TaskValidationError(TaskServiceError):
    """Malformed or missing caller input."""

    status_code = 400


class TaskNotFoundError(TaskServiceError):
    """The targeted task does not exist."""

    status_code = 404


class TaskStoreError(TaskServiceError):
    """Store connection, query or decode failure.

    The message carries the underlying driver text unchanged.
    """

    status_code = 500


__all__ = [
    "TaskNotFoundError",
    "TaskServiceError",
    "TaskStoreError",
    "TaskValidationError",
]
