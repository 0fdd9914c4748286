"""In-memory task and project store.

The store is the single owner of all Task and Project records. It is created
by the application factory and handed to request handlers through a
dependency; nothing here is a process-wide global.

Every operation runs to completion without suspending, so callers on a single
event loop observe whole-call atomicity. Access from several threads must be
serialized by the caller.
"""

import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

from app.schemas.project import ProjectCreate
from app.schemas.task import TaskCreate, TaskUpdate
from models import DEFAULT_PROJECT_COLOR, Project, Task, TaskWithProject

logger = logging.getLogger(__name__)

DEFAULT_PROJECTS: tuple[dict[str, str], ...] = (
    {"name": "Website Redesign", "color": "#3B82F6"},
    {"name": "Mobile App", "color": "#10B981"},
    {"name": "Marketing Campaign", "color": "#8B5CF6"},
)

# Fields the update payload can never touch.
IMMUTABLE_TASK_FIELDS = frozenset({"id", "created_at"})


class InMemoryStore:
    """Dictionary-backed store keyed by monotonically assigned integer ids."""

    def __init__(self, seed_defaults: bool = True, default_color: str = DEFAULT_PROJECT_COLOR):
        self._tasks: dict[int, Task] = {}
        self._projects: dict[int, Project] = {}
        self._next_task_id = 1
        self._next_project_id = 1
        self.default_color = default_color

        if seed_defaults:
            self._seed_default_projects()

    def _seed_default_projects(self) -> None:
        for project in DEFAULT_PROJECTS:
            self.create_project(ProjectCreate(**project))
        logger.debug("Seeded %d default projects", len(DEFAULT_PROJECTS))

    # ----- Tasks -----

    def list_tasks(self) -> list[TaskWithProject]:
        """Return every task joined with its project, ascending by order.

        Ties keep insertion order.
        """
        tasks = sorted(self._tasks.values(), key=lambda task: task.order)
        return [self._join(task) for task in tasks]

    def get_task(self, task_id: int) -> TaskWithProject | None:
        task = self._tasks.get(task_id)
        if task is None:
            return None
        return self._join(task)

    def create_task(self, data: TaskCreate) -> Task:
        """Insert a new task.

        When no order is supplied the task goes after the current maximum,
        so the first task in an empty store gets order 1.
        """
        task_id = self._next_task_id
        self._next_task_id += 1

        order = data.order
        if order is None:
            order = max([0, *(task.order for task in self._tasks.values())]) + 1

        task = Task(
            id=task_id,
            title=data.title,
            description=data.description,
            priority=data.priority,
            status=data.status,
            project_id=data.project_id,
            due_date=data.due_date,
            completed=data.completed,
            order=order,
            created_at=datetime.now(timezone.utc),
        )
        self._tasks[task_id] = task
        return task

    def update_task(self, task_id: int, updates: TaskUpdate | dict[str, Any]) -> Task | None:
        """Merge the supplied fields over an existing task.

        Fields absent from ``updates`` are left unchanged. ``id`` and
        ``created_at`` are dropped from the payload if present.
        """
        existing = self._tasks.get(task_id)
        if existing is None:
            return None

        if isinstance(updates, TaskUpdate):
            changes = updates.model_dump(exclude_unset=True)
        else:
            changes = dict(updates)
        for field in IMMUTABLE_TASK_FIELDS:
            changes.pop(field, None)

        updated = Task.model_validate({**existing.model_dump(), **changes})
        self._tasks[task_id] = updated
        return updated

    def delete_task(self, task_id: int) -> bool:
        return self._tasks.pop(task_id, None) is not None

    def reorder_tasks(self, task_ids: Iterable[int]) -> None:
        """Assign ``order = index`` to each listed task.

        Unknown ids are skipped. Tasks not listed keep their previous order,
        which may now collide with a reassigned value.
        """
        for index, task_id in enumerate(task_ids):
            task = self._tasks.get(task_id)
            if task is not None:
                self._tasks[task_id] = task.model_copy(update={"order": index})

    # ----- Projects -----

    def list_projects(self) -> list[Project]:
        return list(self._projects.values())

    def get_project(self, project_id: int) -> Project | None:
        return self._projects.get(project_id)

    def create_project(self, data: ProjectCreate) -> Project:
        project_id = self._next_project_id
        self._next_project_id += 1

        project = Project(id=project_id, name=data.name, color=data.color or self.default_color)
        self._projects[project_id] = project
        return project

    # ----- Helpers -----

    def _join(self, task: Task) -> TaskWithProject:
        project = None
        if task.project_id is not None:
            project = self._projects.get(task.project_id)
        return TaskWithProject.from_task(task, project)
