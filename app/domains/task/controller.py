"""Task API controller with FastAPI endpoints.

Handlers are ``async def`` so that they run on the event loop thread; store
calls never await, which keeps every store operation atomic per request.
"""

import logging
from datetime import date

from fastapi import APIRouter, Body, Depends, Path, Query, Request

from app.core.dependencies import get_task_service
from app.domains.task.service import TaskService
from app.schemas.base import ResponseSchema
from app.schemas.task import (
    TaskBoard,
    TaskCreate,
    TaskFilter,
    TaskListResponse,
    TaskReorder,
    TaskResponse,
    TaskStats,
    TaskUpdate,
    TaskView,
    TaskWithProjectResponse,
)
from models import Priority, TaskStatus

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/tasks",
    tags=["tasks"],
)


@router.get("", response_model=TaskListResponse)
async def get_tasks(
    _request: Request,
    search: str | None = Query(None),
    priority: Priority | None = Query(None),
    status: TaskStatus | None = Query(None, description="Exact match on the workflow status"),
    completed: bool | None = Query(None, description="Match on the completion flag"),
    project_id: int | None = Query(None),
    view: TaskView = Query(TaskView.all),
    due_from: date | None = Query(None, description="Inclusive lower due date bound"),
    due_to: date | None = Query(None, description="Inclusive upper due date bound"),
    service: TaskService = Depends(get_task_service),
):
    """Get all tasks ascending by order, with optional filters.

    ``status`` matches the workflow status field exactly and does not look at
    the completion flag. To list done or open tasks the way the dashboard
    tabs do, filter with ``completed=true`` or ``completed=false`` instead.
    """
    filters = TaskFilter(
        search=search,
        priority=priority,
        status=status,
        completed=completed,
        project_id=project_id,
        view=view,
        due_from=due_from,
        due_to=due_to,
    )
    tasks = [TaskWithProjectResponse.model_validate(task) for task in service.list_tasks(filters)]

    return TaskListResponse(tasks=tasks, total=len(tasks))


@router.post("", response_model=ResponseSchema, status_code=201)
async def create_task(
    _request: Request,
    task_data: TaskCreate,
    service: TaskService = Depends(get_task_service),
):
    """Create a new task."""
    task = service.create_task(task_data)

    return ResponseSchema(
        status="success",
        message="Task created successfully",
        data=TaskResponse.model_validate(task).model_dump(),
    )


@router.post("/reorder", response_model=ResponseSchema)
async def reorder_tasks(
    _request: Request,
    reorder: TaskReorder = Body(...),
    service: TaskService = Depends(get_task_service),
):
    """Assign a manual order to the listed tasks."""
    service.reorder_tasks(reorder.task_ids)

    return ResponseSchema(status="success", message="Tasks reordered successfully", data=None)


@router.get("/board", response_model=ResponseSchema)
async def get_task_board(
    _request: Request,
    service: TaskService = Depends(get_task_service),
):
    """Get tasks grouped into status board columns."""
    columns = {
        key: [TaskWithProjectResponse.model_validate(task) for task in tasks]
        for key, tasks in service.get_board().items()
    }
    board = TaskBoard(
        active=columns[TaskStatus.active.value],
        in_progress=columns[TaskStatus.in_progress.value],
        completed=columns[TaskStatus.completed.value],
    )

    return ResponseSchema(
        status="success",
        message="Task board retrieved successfully",
        data=board.model_dump(by_alias=True),
    )


@router.get("/stats/summary", response_model=ResponseSchema)
async def get_task_stats(
    _request: Request,
    service: TaskService = Depends(get_task_service),
):
    """Get task analytics."""
    stats = service.get_task_stats()

    return ResponseSchema(
        status="success",
        message="Task statistics retrieved successfully",
        data=TaskStats.model_validate(stats).model_dump(),
    )


@router.get("/{task_id}", response_model=ResponseSchema)
async def get_task(
    _request: Request,
    task_id: int = Path(..., description="Task ID"),
    service: TaskService = Depends(get_task_service),
):
    """Get a specific task by ID."""
    task = service.get_task(task_id)

    return ResponseSchema(
        status="success",
        message="Task retrieved successfully",
        data=TaskWithProjectResponse.model_validate(task).model_dump(),
    )


@router.patch("/{task_id}", response_model=ResponseSchema)
async def update_task(
    _request: Request,
    task_id: int = Path(..., description="Task ID"),
    task_data: TaskUpdate = Body(...),
    service: TaskService = Depends(get_task_service),
):
    """Update a specific task."""
    task = service.update_task(task_id, task_data)

    return ResponseSchema(
        status="success",
        message="Task updated successfully",
        data=TaskResponse.model_validate(task).model_dump(),
    )


@router.delete("/{task_id}", response_model=ResponseSchema)
async def delete_task(
    _request: Request,
    task_id: int = Path(..., description="Task ID"),
    service: TaskService = Depends(get_task_service),
):
    """Delete a specific task."""
    service.delete_task(task_id)

    return ResponseSchema(status="success", message="Task deleted successfully", data=None)
