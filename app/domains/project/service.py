"""Project service layer with business logic."""

import logging
from typing import Any, Dict, List

from app.exceptions.project import ProjectNotFoundError
from app.schemas.project import ProjectCreate
from app.store import InMemoryStore
from models import Project, TaskWithProject

logger = logging.getLogger(__name__)


class ProjectService:
    """Service class for project business logic.

    Projects can be created and read; there is no update or delete.
    """

    def __init__(self, store: InMemoryStore):
        self.store = store

    def create_project(self, project_data: ProjectCreate) -> Project:
        """Create a new project."""
        project = self.store.create_project(project_data)
        logger.info("Created project %s (%s)", project.id, project.name)
        return project

    def list_projects(self) -> List[Project]:
        """Get all projects in creation order."""
        return self.store.list_projects()

    def get_project(self, project_id: int) -> Project:
        """Get a project by ID."""
        project = self.store.get_project(project_id)
        if project is None:
            logger.debug("Project %s not found", project_id)
            raise ProjectNotFoundError(project_id=project_id)
        return project

    def get_project_tasks(self, project_id: int) -> List[TaskWithProject]:
        """Get all tasks of an existing project, ascending by order."""
        self.get_project(project_id)
        return [task for task in self.store.list_tasks() if task.project_id == project_id]

    def get_project_with_task_counts(self, project_id: int) -> Dict[str, Any]:
        """Get project with task counts."""
        project = self.get_project(project_id)
        tasks = [task for task in self.store.list_tasks() if task.project_id == project_id]

        project_dict = project.model_dump()
        project_dict["task_count"] = len(tasks)
        project_dict["completed_task_count"] = sum(1 for task in tasks if task.completed)
        return project_dict

    def get_project_stats(self) -> Dict[str, Any]:
        """Get project statistics."""
        projects = self.store.list_projects()
        project_ids = {project.id for project in projects}

        counts = {project_id: 0 for project_id in project_ids}
        for task in self.store.list_tasks():
            if task.project_id in project_ids:
                counts[task.project_id] += 1

        total_projects = len(projects)
        projects_with_tasks = sum(1 for count in counts.values() if count > 0)
        average = sum(counts.values()) / total_projects if total_projects else 0.0

        return {
            "total_projects": total_projects,
            "projects_with_tasks": projects_with_tasks,
            "average_tasks_per_project": float(average),
        }
