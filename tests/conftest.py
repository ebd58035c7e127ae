"""Pytest configuration and fixtures for task tracker tests."""

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from tasktracker.api import create_app
from tasktracker.config import DatabaseSettings, TaskTrackerSettings
from tasktracker.database import build_engine, create_db_and_tables
from tasktracker.schemas.database import TaskRecord
from tasktracker.services import TaskService


@pytest.fixture
def engine():
    """In-memory SQLite engine with the tasks table created."""
    engine = build_engine(DatabaseSettings(url="sqlite://"))
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    """Session on the in-memory engine."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def task_service(session):
    """TaskService bound to the in-memory store."""
    return TaskService(session)


@pytest.fixture
def stored_task(session):
    """A single incomplete task persisted directly through the session."""
    record = TaskRecord(description="Water the plants")
    session.add(record)
    session.commit()
    session.refresh(record)
    return record.to_read_model()


@pytest.fixture
def app(engine):
    """FastAPI application wired to the in-memory store."""
    return create_app(engine=engine, settings=TaskTrackerSettings())


@pytest.fixture
def client(app):
    """HTTP test client for the application."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def sample_descriptions():
    """Descriptions covering plain, unicode, whitespace-only and long text."""
    return [
        "buy milk",
        "Écrire le rapport ✍️",
        "   ",
        "x" * 500,
    ]
