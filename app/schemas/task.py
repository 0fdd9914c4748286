"""Task schemas for request/response serialization."""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import AliasChoices, Field, field_validator

from models import Priority, TaskStatus

from .base import BaseSchema, TimestampedSchema
from .project import ProjectResponse

# Request bodies also accept the camelCase keys sent by the web client.
PROJECT_ID_ALIASES = AliasChoices("project_id", "projectId")
DUE_DATE_ALIASES = AliasChoices("due_date", "dueDate")


def _clean_title(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Task title cannot be empty or only whitespace")
    return v


class TaskBase(BaseSchema):
    """Base task schema with common fields."""

    title: str = Field(..., min_length=1, max_length=500)
    description: str | None = ""
    priority: Priority = Priority.medium
    status: TaskStatus = TaskStatus.active
    project_id: int | None = Field(None, validation_alias=PROJECT_ID_ALIASES)
    due_date: date | None = Field(None, validation_alias=DUE_DATE_ALIASES)
    completed: bool = False

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _clean_title(v)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str:
        return v or ""


class TaskCreate(TaskBase):
    """Schema for creating a new task.

    When ``order`` is omitted the store places the task after all others.
    """

    order: int | None = None


class TaskUpdate(BaseSchema):
    """Schema for partially updating a task.

    Only fields present in the payload are applied. Unknown keys, including
    ``id`` and ``created_at``, are ignored.
    """

    title: str | None = Field(None, min_length=1, max_length=500)
    description: str | None = None
    priority: Priority | None = None
    status: TaskStatus | None = None
    project_id: int | None = Field(None, validation_alias=PROJECT_ID_ALIASES)
    due_date: date | None = Field(None, validation_alias=DUE_DATE_ALIASES)
    completed: bool | None = None
    order: int | None = None

    @field_validator("title", "priority", "status", "completed", "order", mode="before")
    @classmethod
    def reject_null(cls, v, info):
        """Non-nullable task fields may be omitted but not set to null."""
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str | None:
        if v is not None:
            v = _clean_title(v)
        return v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str:
        return v or ""


class TaskReorder(BaseSchema):
    """Schema for a manual reorder request."""

    task_ids: list[int] = Field(..., validation_alias=AliasChoices("task_ids", "taskIds"))


class TaskResponse(TimestampedSchema):
    """Schema for task response."""

    title: str
    description: str
    priority: Priority
    status: TaskStatus
    project_id: int | None = None
    due_date: date | None = None
    completed: bool
    order: int


class TaskWithProjectResponse(TaskResponse):
    """Schema for task response with its resolved project."""

    project: ProjectResponse | None = None


class TaskListResponse(BaseSchema):
    """Schema for task list response."""

    tasks: list[TaskWithProjectResponse]
    total: int


class TaskView(str, Enum):
    all = "all"
    today = "today"
    important = "important"
    completed = "completed"


class TaskFilter(BaseSchema):
    """Schema for filtering tasks."""

    search: str | None = None
    priority: Priority | None = None
    status: TaskStatus | None = None
    completed: bool | None = None
    project_id: int | None = None
    view: TaskView = TaskView.all
    due_from: date | None = None
    due_to: date | None = None


class TaskBoard(BaseSchema):
    """Schema for the status board: one column per workflow state."""

    active: list[TaskWithProjectResponse] = []
    in_progress: list[TaskWithProjectResponse] = Field(default=[], serialization_alias="in-progress")
    completed: list[TaskWithProjectResponse] = []


class ProjectTaskSummary(BaseSchema):
    """Per-project task counts used by the analytics summary."""

    project_id: int | None = None
    name: str
    total: int = 0
    completed: int = 0


class TaskStats(BaseSchema):
    """Schema for task analytics."""

    total: int
    completed: int
    active: int
    overdue: int
    due_today: int
    due_this_week: int
    completion_rate: float
    by_priority: dict[str, int]
    by_project: list[ProjectTaskSummary]
