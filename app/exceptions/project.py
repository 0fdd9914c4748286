"""Project-related exceptions."""

from .base import NotFoundError


class ProjectNotFoundError(NotFoundError):
    """Raised when a project is not found."""

    def __init__(self, message: str = "Project not found", project_id: int | None = None):
        details = {"project_id": project_id} if project_id is not None else None
        super().__init__(message=message, error_code="PROJECT_NOT_FOUND", details=details)
