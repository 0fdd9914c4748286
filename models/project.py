"""
Project model for grouping tasks.
"""

from .base import Entity

DEFAULT_PROJECT_COLOR = "#3B82F6"


class Project(Entity):
    """
    Represents a project entity in the application.
    """

    name: str
    color: str = DEFAULT_PROJECT_COLOR
