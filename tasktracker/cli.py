#!/usr/bin/env python3
"""Task Tracker CLI.

Command-line interface for running the HTTP service and inspecting the
task store.
"""

import typer
from rich.console import Console
from rich.table import Table

from .config import get_settings
from .database import create_db_and_tables, get_session_context
from .errors import TaskServiceError
from .logging_setup import configure_logging
from .repositories import TaskRepository
from .services import TaskService


# Initialize CLI and console
app = typer.Typer(help="Task Tracker CLI")
console = Console()


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Interface to bind"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to listen on"),
    reload: bool = typer.Option(False, "--reload/--no-reload", help="Auto-reload"),
):
    """Run the HTTP server."""
    import uvicorn

    settings = get_settings()
    host = host or settings.server.host
    port = port or settings.server.port

    console.print(f"[bold green]Server is running on {host}:{port}[/bold green]")
    uvicorn.run(
        "tasktracker.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command()
def init_db():
    """Create the task store and report its size."""
    try:
        create_db_and_tables()
        with get_session_context() as session:
            total = TaskRepository(session).count()
    except TaskServiceError as e:
        console.print(f"[bold red]Error initializing task store: {e}[/bold red]")
        raise typer.Exit(code=1) from e

    console.print(f"[green]Task store ready. Current task count: {total}[/green]")


@app.command()
def list_tasks():
    """Show all tasks."""
    try:
        create_db_and_tables()
        with get_session_context() as session:
            tasks = TaskService(session).list_tasks()
    except TaskServiceError as e:
        console.print(f"[bold red]Error listing tasks: {e}[/bold red]")
        raise typer.Exit(code=1) from e

    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return

    table = Table(title="Tasks")
    table.add_column("ID", style="cyan")
    table.add_column("Description")
    table.add_column("Completed", justify="center")
    for task in tasks:
        table.add_row(task.id, task.description, "✓" if task.completed else "")
    console.print(table)


@app.callback()
def main():
    """Task Tracker CLI.

    Serve the to-do list HTTP API and inspect its task store.
    """
    configure_logging(get_settings().log_level)


if __name__ == "__main__":
    app()
