"""Database initialization and session management.

The engine is built once per process and shared by every request; sessions
are short-lived and opened per request.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from .config import DatabaseSettings, get_settings
from .errors import TaskStoreError
from .schemas.database import TaskRecord


logger = logging.getLogger(__name__)

_engine: Engine | None = None


def build_engine(database: DatabaseSettings) -> Engine:
    """Create an engine for the configured task store.

    SQLite connections are shared across the server's worker threads, and an
    in-memory database is pinned to a single connection so every session sees
    the same data.
    """
    kwargs = {"echo": database.echo_sql}
    if database.url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database.url or database.url == "sqlite://":
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_timeout"] = database.pool_timeout
    return create_engine(database.url, **kwargs)


def get_engine() -> Engine:
    """Get the process-wide engine, creating it on first use."""
    global _engine
    if _engine is None:
        _engine = build_engine(get_settings().database)
    return _engine


def create_db_and_tables(engine: Engine | None = None) -> None:
    """Create the tasks table.

    Safe to call multiple times - only creates tables that don't exist.

    Raises:
        TaskStoreError: If the store cannot be reached or written

    """
    engine = engine or get_engine()
    try:
        SQLModel.metadata.create_all(engine, tables=[TaskRecord.__table__])
    except SQLAlchemyError as e:
        logger.error(f"Error creating task store: {e}")
        raise TaskStoreError(str(e)) from e
    logger.info(f"Task store ready at {engine.url!r}")


@contextmanager
def get_session_context(
    engine: Engine | None = None,
) -> Generator[Session, None, None]:
    """Context manager for database sessions with automatic cleanup.

    Usage:
        with get_session_context() as session:
            # Use session here
            pass

    """
    session = Session(engine or get_engine())
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


__all__ = [
    "build_engine",
    "create_db_and_tables",
    "get_engine",
    "get_session_context",
]
