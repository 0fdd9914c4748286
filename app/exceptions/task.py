"""Task-related exceptions."""

from .base import NotFoundError


class TaskNotFoundError(NotFoundError):
    """Raised when a task is not found."""

    def __init__(self, message: str = "Task not found", task_id: int | None = None):
        details = {"task_id": task_id} if task_id is not None else None
        super().__init__(message=message, error_code="TASK_NOT_FOUND", details=details)
