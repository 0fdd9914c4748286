"""Task service layer with business logic."""

import logging
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from app.exceptions.base import ValidationError
from app.exceptions.task import TaskNotFoundError
from app.schemas.task import TaskCreate, TaskFilter, TaskUpdate, TaskView
from app.store import InMemoryStore
from models import Priority, Task, TaskStatus, TaskWithProject

logger = logging.getLogger(__name__)

NO_PROJECT_NAME = "No Project"


class TaskService:
    """Service class for task business logic.

    Store lookups return ``None`` for unknown ids; this layer turns those
    misses into ``TaskNotFoundError`` for the HTTP controllers.
    """

    def __init__(self, store: InMemoryStore):
        self.store = store

    def create_task(self, task_data: TaskCreate) -> Task:
        """Create a new task."""
        task = self.store.create_task(task_data)
        logger.info("Created task %s (order=%s)", task.id, task.order)
        return task

    def get_task(self, task_id: int) -> TaskWithProject:
        """Get a task joined with its project."""
        task = self.store.get_task(task_id)
        if task is None:
            logger.debug("Task %s not found", task_id)
            raise TaskNotFoundError(task_id=task_id)
        return task

    def list_tasks(
        self, filters: Optional[TaskFilter] = None, today: Optional[date] = None
    ) -> List[TaskWithProject]:
        """Get all tasks, ascending by order, optionally filtered."""
        tasks = self.store.list_tasks()
        if filters is None:
            return tasks

        if filters.due_from and filters.due_to and filters.due_from > filters.due_to:
            raise ValidationError(
                "due_from must not be after due_to",
                details={"due_from": filters.due_from.isoformat(), "due_to": filters.due_to.isoformat()},
            )

        today = today or date.today()
        return [task for task in tasks if self._matches(task, filters, today)]

    def update_task(self, task_id: int, task_data: TaskUpdate) -> Task:
        """Update a task with the fields present in ``task_data``."""
        task = self.store.update_task(task_id, task_data)
        if task is None:
            logger.debug("Task %s not found for update", task_id)
            raise TaskNotFoundError(task_id=task_id)
        logger.info(
            "Updated task %s fields=%s",
            task_id,
            sorted(task_data.model_dump(exclude_unset=True)),
        )
        return task

    def delete_task(self, task_id: int) -> bool:
        """Delete a task."""
        if not self.store.delete_task(task_id):
            logger.debug("Task %s not found for delete", task_id)
            raise TaskNotFoundError(task_id=task_id)
        logger.info("Deleted task %s", task_id)
        return True

    def reorder_tasks(self, task_ids: List[int]) -> None:
        """Apply a manual ordering; unknown ids are ignored by the store."""
        self.store.reorder_tasks(task_ids)
        logger.info("Reordered %d tasks", len(task_ids))

    def get_board(self) -> Dict[str, List[TaskWithProject]]:
        """Group tasks into status board columns.

        A completed task always lands in the completed column, whatever its
        status. An uncompleted task whose status is ``completed`` matches no
        column.
        """
        board: Dict[str, List[TaskWithProject]] = {
            TaskStatus.active.value: [],
            TaskStatus.in_progress.value: [],
            TaskStatus.completed.value: [],
        }
        for task in self.store.list_tasks():
            if task.completed:
                board[TaskStatus.completed.value].append(task)
            elif task.status == TaskStatus.in_progress:
                board[TaskStatus.in_progress.value].append(task)
            elif task.status == TaskStatus.active:
                board[TaskStatus.active.value].append(task)
        return board

    def get_task_stats(self, today: Optional[date] = None) -> Dict[str, Any]:
        """Compute the analytics summary against ``today``."""
        today = today or date.today()
        week_start, week_end = self._week_bounds(today)
        tasks = self.store.list_tasks()

        total = len(tasks)
        completed = sum(1 for task in tasks if task.completed)
        overdue = sum(
            1 for task in tasks if task.due_date and task.due_date < today and not task.completed
        )
        due_today = sum(1 for task in tasks if task.due_date == today)
        due_this_week = sum(
            1 for task in tasks if task.due_date and week_start <= task.due_date <= week_end
        )

        by_priority = {priority.value: 0 for priority in Priority}
        for task in tasks:
            by_priority[task.priority.value] += 1

        by_project: Dict[Optional[int], Dict[str, Any]] = {}
        for task in tasks:
            key = task.project.id if task.project else None
            if key not in by_project:
                by_project[key] = {
                    "project_id": key,
                    "name": task.project.name if task.project else NO_PROJECT_NAME,
                    "total": 0,
                    "completed": 0,
                }
            by_project[key]["total"] += 1
            if task.completed:
                by_project[key]["completed"] += 1

        return {
            "total": total,
            "completed": completed,
            "active": total - completed,
            "overdue": overdue,
            "due_today": due_today,
            "due_this_week": due_this_week,
            "completion_rate": round(completed / total * 100, 1) if total else 0.0,
            "by_priority": by_priority,
            "by_project": list(by_project.values()),
        }

    # Private helper methods
    @staticmethod
    def _matches(task: TaskWithProject, filters: TaskFilter, today: date) -> bool:
        if filters.search:
            needle = filters.search.lower()
            if needle not in task.title.lower() and needle not in task.description.lower():
                return False

        if filters.priority and task.priority != filters.priority:
            return False

        if filters.status and task.status != filters.status:
            return False

        if filters.completed is not None and task.completed != filters.completed:
            return False

        if filters.project_id is not None and task.project_id != filters.project_id:
            return False

        if filters.view == TaskView.today and task.due_date != today:
            return False
        if filters.view == TaskView.important and task.priority != Priority.high:
            return False
        if filters.view == TaskView.completed and not task.completed:
            return False

        if filters.due_from or filters.due_to:
            if task.due_date is None:
                return False
            if filters.due_from and task.due_date < filters.due_from:
                return False
            if filters.due_to and task.due_date > filters.due_to:
                return False

        return True

    @staticmethod
    def _week_bounds(today: date) -> tuple[date, date]:
        """Return the Sunday-to-Saturday week containing ``today``."""
        # weekday(): Monday=0 .. Sunday=6
        start = today - timedelta(days=(today.weekday() + 1) % 7)
        return start, start + timedelta(days=6)
