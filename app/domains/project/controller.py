"""Project API controller with FastAPI endpoints."""

import logging

from fastapi import APIRouter, Depends, Path, Request

from app.core.dependencies import get_project_service
from app.domains.project.service import ProjectService
from app.schemas.base import ResponseSchema
from app.schemas.project import (
    ProjectCreate,
    ProjectListResponse,
    ProjectResponse,
    ProjectStats,
    ProjectWithCounts,
)
from app.schemas.task import TaskWithProjectResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/projects",
    tags=["projects"],
)


@router.post("", response_model=ResponseSchema, status_code=201)
async def create_project(
    _request: Request,
    project_data: ProjectCreate,
    service: ProjectService = Depends(get_project_service),
):
    """Create a new project."""
    project = service.create_project(project_data)

    return ResponseSchema(
        status="success",
        message="Project created successfully",
        data=ProjectResponse.model_validate(project).model_dump(),
    )


@router.get("", response_model=ProjectListResponse)
async def get_projects(
    _request: Request,
    service: ProjectService = Depends(get_project_service),
):
    """Get all projects in creation order."""
    projects = [ProjectResponse.model_validate(project) for project in service.list_projects()]

    return ProjectListResponse(projects=projects, total=len(projects))


@router.get("/stats/summary", response_model=ResponseSchema)
async def get_project_stats(
    _request: Request,
    service: ProjectService = Depends(get_project_service),
):
    """Get project statistics."""
    stats = service.get_project_stats()

    return ResponseSchema(
        status="success",
        message="Project statistics retrieved successfully",
        data=ProjectStats.model_validate(stats).model_dump(),
    )


@router.get("/{project_id}", response_model=ResponseSchema)
async def get_project(
    _request: Request,
    project_id: int = Path(..., description="Project ID"),
    service: ProjectService = Depends(get_project_service),
):
    """Get a specific project by ID, with task counts."""
    project = service.get_project_with_task_counts(project_id)

    return ResponseSchema(
        status="success",
        message="Project retrieved successfully",
        data=ProjectWithCounts.model_validate(project).model_dump(),
    )


@router.get("/{project_id}/tasks", response_model=ResponseSchema)
async def get_project_tasks(
    _request: Request,
    project_id: int = Path(..., description="Project ID"),
    service: ProjectService = Depends(get_project_service),
):
    """Get all tasks for a specific project."""
    project = service.get_project(project_id)
    tasks = service.get_project_tasks(project_id)

    return ResponseSchema(
        status="success",
        message="Project tasks retrieved successfully",
        data={
            "project": ProjectResponse.model_validate(project).model_dump(),
            "tasks": [TaskWithProjectResponse.model_validate(task).model_dump() for task in tasks],
        },
    )
