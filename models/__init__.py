"""
Models package initialization.
"""

from .base import Entity
from .project import DEFAULT_PROJECT_COLOR, Project
from .task import Priority, Task, TaskStatus, TaskWithProject

__all__ = [
    "Entity",
    "Project",
    "DEFAULT_PROJECT_COLOR",
    "Task",
    "TaskWithProject",
    "Priority",
    "TaskStatus",
]
