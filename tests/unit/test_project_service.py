"""
Unit tests for ProjectService.

This module contains unit tests for the ProjectService class, covering
project creation, lookup, task counts and statistics.
"""

import pytest

from app.domains.project.service import ProjectService
from app.exceptions.project import ProjectNotFoundError
from app.schemas.project import ProjectCreate
from app.schemas.task import TaskCreate, TaskUpdate
from app.store import InMemoryStore


class TestProjectService:
    """Test cases for ProjectService."""

    def test_create_project_success(self, project_service):
        project = project_service.create_project(ProjectCreate(name="New Project", color="#123456"))

        assert project.id == 4
        assert project.name == "New Project"
        assert project.color == "#123456"

    def test_create_project_minimal_data(self, project_service):
        project = project_service.create_project(ProjectCreate(name="Minimal Project"))

        assert project.color == "#3B82F6"

    def test_create_project_duplicate_name_allowed(self, project_service):
        first = project_service.create_project(ProjectCreate(name="Twin"))
        second = project_service.create_project(ProjectCreate(name="Twin"))

        assert first.id != second.id

    def test_create_project_from_factory(self, project_service, project_factory):
        payload = project_factory()

        project = project_service.create_project(payload)

        assert project.name == payload.name
        assert project.color == payload.color

    def test_list_projects(self, project_service):
        names = [project.name for project in project_service.list_projects()]

        assert names == ["Website Redesign", "Mobile App", "Marketing Campaign"]

    def test_get_project_success(self, project_service):
        project = project_service.get_project(3)

        assert project.name == "Marketing Campaign"

    def test_get_project_not_found(self, project_service):
        with pytest.raises(ProjectNotFoundError) as exc_info:
            project_service.get_project(99)

        assert exc_info.value.status_code == 404
        assert exc_info.value.error_code == "PROJECT_NOT_FOUND"

    def test_get_project_tasks(self, project_service, sample_tasks):
        tasks = project_service.get_project_tasks(1)

        assert [task.title for task in tasks] == ["Design homepage", "Fix footer links"]

    def test_get_project_tasks_not_found(self, project_service):
        with pytest.raises(ProjectNotFoundError):
            project_service.get_project_tasks(99)

    def test_get_project_with_task_counts(self, project_service, store, sample_tasks):
        store.update_task(sample_tasks[0].id, TaskUpdate(completed=True))

        result = project_service.get_project_with_task_counts(1)

        assert result["id"] == 1
        assert result["name"] == "Website Redesign"
        assert result["task_count"] == 2
        assert result["completed_task_count"] == 1

    def test_get_project_with_task_counts_empty(self, project_service):
        result = project_service.get_project_with_task_counts(2)

        assert result["task_count"] == 0
        assert result["completed_task_count"] == 0

    def test_get_project_stats(self, project_service, sample_tasks):
        stats = project_service.get_project_stats()

        assert stats == {
            "total_projects": 3,
            "projects_with_tasks": 3,
            "average_tasks_per_project": pytest.approx(4 / 3),
        }

    def test_get_project_stats_ignores_dangling_references(self, project_service, store):
        store.create_task(TaskCreate(title="Dangling", project_id=77))
        store.create_task(TaskCreate(title="Real", project_id=2))

        stats = project_service.get_project_stats()

        assert stats["projects_with_tasks"] == 1
        assert stats["average_tasks_per_project"] == pytest.approx(1 / 3)

    def test_get_project_stats_no_projects(self):
        service = ProjectService(InMemoryStore(seed_defaults=False))

        assert service.get_project_stats() == {
            "total_projects": 0,
            "projects_with_tasks": 0,
            "average_tasks_per_project": 0.0,
        }
