"""Project schemas for request/response serialization."""

from __future__ import annotations

from pydantic import Field, field_validator

from .base import BaseModelSchema, BaseSchema


class ProjectBase(BaseSchema):
    """Base project schema with common fields."""

    name: str = Field(..., min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate and clean the project name."""
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("Project name cannot be empty or only whitespace")
        return v


class ProjectCreate(ProjectBase):
    """Schema for creating a new project.

    ``color`` is optional; the store fills in its default when omitted.
    """

    color: str | None = Field(None, max_length=32)

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                return None
        return v


class ProjectResponse(BaseModelSchema):
    """Schema for project response."""

    name: str
    color: str


class ProjectWithCounts(ProjectResponse):
    """Schema for project response with task counts."""

    task_count: int = 0
    completed_task_count: int = 0


class ProjectListResponse(BaseSchema):
    """Schema for project list response."""

    projects: list[ProjectResponse]
    total: int


class ProjectStats(BaseSchema):
    """Schema for project statistics."""

    total_projects: int
    projects_with_tasks: int
    average_tasks_per_project: float
