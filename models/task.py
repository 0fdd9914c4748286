"""
A module defining the `Task` record and its read-time projection.

Classes:
    Priority: Allowed task priorities.
    TaskStatus: Allowed task workflow states.
    Task: A single task with title, priority, status, due date and manual
    ordering information.
    TaskWithProject: A task joined with its resolved project, built on
    every read and never stored.
"""

from datetime import date, datetime
from enum import Enum

from pydantic import Field

from .base import Entity
from .project import Project


class Priority(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"


class TaskStatus(str, Enum):
    active = "active"
    in_progress = "in-progress"
    completed = "completed"


class Task(Entity):
    title: str
    description: str = ""
    priority: Priority = Priority.medium
    status: TaskStatus = TaskStatus.active
    project_id: int | None = None
    due_date: date | None = None  # date only, serialized as YYYY-MM-DD
    # Independent of status; callers keep the two consistent.
    completed: bool = False
    order: int = 0
    created_at: datetime = Field(frozen=True)


class TaskWithProject(Task):
    project: Project | None = None

    @classmethod
    def from_task(cls, task: Task, project: Project | None) -> "TaskWithProject":
        return cls(**task.model_dump(), project=project)
