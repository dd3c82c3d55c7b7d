"""User management CLI using Typer.

Provides schema management and a launcher for the REST API.
"""

import asyncio

import typer
import uvicorn
from rich.console import Console

from usermanagement.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
)
from usermanagement_config.settings import get_settings

app = typer.Typer(
    name="usermgmt",
    help="User Management Service CLI",
    no_args_is_help=True,
)
console = Console()


db_app = typer.Typer(
    name="db",
    help="Database schema utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)


@db_app.command("init")
def init_db() -> None:
    """Create missing tables. Existing tables and data are left untouched."""
    asyncio.run(create_tables())
    console.print("[bold green]Database schema initialized[/bold green]")


@db_app.command("drop")
def drop_db(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Drop all tables. This deletes every stored user."""
    if not yes:
        typer.confirm("Drop all tables and delete every user?", abort=True)
    asyncio.run(drop_tables())
    console.print("[yellow]All tables dropped[/yellow]")


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default from settings)"),
    port: int | None = typer.Option(None, help="Port (default from settings)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the REST API under uvicorn."""
    settings = get_settings()
    bind_host = host or settings.api_host
    bind_port = port or settings.api_port
    console.print(
        f"[bold green]{settings.app_name}[/bold green] "
        f"on [cyan]http://{bind_host}:{bind_port}[/cyan]"
    )
    uvicorn.run(
        "usermanagement.presentation.api.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
