# app/core/dependencies.py
from fastapi import Depends, Request

from app.domains.project.service import ProjectService
from app.domains.task.service import TaskService
from app.store import InMemoryStore


def get_store(request: Request) -> InMemoryStore:
    """Return the store owned by the running application.

    Returns:
        InMemoryStore: The store attached to ``app.state`` by the factory
    """
    return request.app.state.store


def get_task_service(store: InMemoryStore = Depends(get_store)) -> TaskService:
    return TaskService(store)


def get_project_service(store: InMemoryStore = Depends(get_store)) -> ProjectService:
    return ProjectService(store)
