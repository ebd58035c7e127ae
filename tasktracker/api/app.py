"""FastAPI application for the task tracker.

Routes:
- GET /              home page
- GET /tasks         list tasks
- POST /tasks        add a task (form field ``description``)
- DELETE /tasks/{id} delete a task
- PUT /tasks/{id}    mark a task completed
"""

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates
from sqlalchemy.engine import Engine

from .. import __version__
from ..config import TaskTrackerSettings, get_settings
from ..database import create_db_and_tables, get_engine
from .routes import router


def create_app(
    *, engine: Engine | None = None, settings: TaskTrackerSettings | None = None
) -> FastAPI:
    """Create FastAPI application.

    Args:
        engine: Task store engine. If None, uses the process-wide engine.
        settings: Settings to use. If None, uses the cached global settings.

    Returns:
        Configured FastAPI application.
    """
    settings = settings or get_settings()
    engine = engine or get_engine()
    create_db_and_tables(engine)

    app = FastAPI(
        title="Task Tracker",
        description="Minimal to-do list service",
        version=__version__,
    )
    app.state.engine = engine
    app.state.templates = Jinja2Templates(directory=str(settings.templates_dir))

    app.include_router(router)
    return app
