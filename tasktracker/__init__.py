"""Task Tracker - minimal to-do list service.

Core Components:
- services: task operations (list, create, delete, complete)
- repositories: task store over SQLModel
- api: FastAPI application and routes
- cli: typer commands to serve the app and inspect the store
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
