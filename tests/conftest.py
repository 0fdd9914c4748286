# tests/conftest.py
import os

# Set up test environment variables BEFORE any other imports
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("SEED_DEFAULT_PROJECTS", "true")

from datetime import date, timedelta

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.domains.project.service import ProjectService
from app.domains.task.service import TaskService
from app.main import create_app
from app.schemas.task import TaskCreate
from app.store import InMemoryStore
from models import Priority, TaskStatus


# Store fixtures
@pytest.fixture
def store():
    """Create a store seeded with the three default projects."""
    return InMemoryStore()


@pytest.fixture
def empty_store():
    """Create a store without any projects."""
    return InMemoryStore(seed_defaults=False)


@pytest.fixture
def task_service(store):
    return TaskService(store)


@pytest.fixture
def project_service(store):
    return ProjectService(store)


# Application fixtures
@pytest.fixture
def test_app(store):
    """Create an application that owns the test store."""
    return create_app(store=store)


@pytest_asyncio.fixture
async def client(test_app):
    """Create an async HTTP client bound to the test application."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# Date fixtures
@pytest.fixture
def today():
    """A fixed Wednesday so week boundaries are predictable."""
    return date(2024, 5, 15)


# Task fixtures
@pytest.fixture
def sample_tasks(store, today):
    """Create a small, varied set of tasks.

    Orders follow creation: 1..5.
    """
    payloads = [
        TaskCreate(
            title="Design homepage",
            description="Hero section and navigation",
            priority=Priority.high,
            project_id=1,
            due_date=today,
        ),
        TaskCreate(
            title="Build login screen",
            priority=Priority.medium,
            status=TaskStatus.in_progress,
            project_id=2,
            due_date=today + timedelta(days=2),
        ),
        TaskCreate(
            title="Write launch email",
            description="Draft copy for the newsletter",
            priority=Priority.low,
            status=TaskStatus.completed,
            completed=True,
            project_id=3,
            due_date=today - timedelta(days=3),
        ),
        TaskCreate(
            title="Fix footer links",
            priority=Priority.high,
            project_id=1,
            due_date=today - timedelta(days=1),
        ),
        TaskCreate(title="Plan vacation", priority=Priority.low),
    ]
    return [store.create_task(payload) for payload in payloads]


# Factory fixtures
@pytest.fixture
def task_factory():
    from factories import TaskCreateFactory

    return TaskCreateFactory


@pytest.fixture
def project_factory():
    from factories import ProjectCreateFactory

    return ProjectCreateFactory
