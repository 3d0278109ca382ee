"""Pytest configuration and fixtures for testing.

This module provides shared fixtures for database testing using in-memory SQLite
and fake repositories for exercising failure paths without a database.
"""

from typing import Dict, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from task_svc.models.base import Base
from task_svc.models.task import Task
from task_svc.api.app import app
from task_svc.database import get_db
import task_svc.database


class InMemoryTaskRepository:
    """TaskRepository keeping tasks in a dict, with sequential IDs from 1."""

    def __init__(self):
        self.tasks: Dict[int, Task] = {}
        self.next_id = 1

    def create_task(self, task: Task) -> int:
        task.id = self.next_id
        self.tasks[task.id] = task
        self.next_id += 1
        return task.id

    def get_task_by_id(self, task_id: int) -> Optional[Task]:
        return self.tasks.get(task_id)


class FailingTaskRepository:
    """TaskRepository whose every call fails like a broken database."""

    error_text = "connection refused: postgres://admin:secret@db:5432"

    def __init__(self):
        self.calls = []

    def create_task(self, task: Task) -> int:
        self.calls.append(("create_task", task))
        raise RuntimeError(self.error_text)

    def get_task_by_id(self, task_id: int) -> Optional[Task]:
        self.calls.append(("get_task_by_id", task_id))
        raise RuntimeError(self.error_text)


@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite engine with all tables.

    Yields:
        SQLAlchemy Engine instance configured for in-memory SQLite.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Create a database session for testing.

    Yields:
        SQLAlchemy Session instance for database operations.
    """
    SessionLocal = sessionmaker(
        bind=db_engine,
        autoflush=False,
        expire_on_commit=False
    )

    session = SessionLocal()

    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def clean_db_state(monkeypatch):
    """Reset module-level database state before and after each test.

    DATABASE_URL is cleared so the application falls back to in-memory SQLite.
    """
    monkeypatch.delenv("DATABASE_URL", raising=False)
    task_svc.database._reset_db_state()

    yield

    task_svc.database._reset_db_state()


@pytest.fixture(scope="function")
def client(db_session, clean_db_state):
    """Create a FastAPI test client with database dependency override.

    Yields:
        TestClient instance configured with test database session.
    """
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def memory_repository():
    """Empty in-memory task repository."""
    return InMemoryTaskRepository()


@pytest.fixture
def failing_repository():
    """Repository that raises on every call."""
    return FailingTaskRepository()
