"""Database management CLI commands."""

import typer

from src.catalog.core.services.database.db_manage import DbManageService
from src.catalog.runtime.context import get_config

from .utils import console, get_db_session_service

db_app = typer.Typer(help="🗄️  Database management commands")


@db_app.command("init")
def init_database() -> None:
    """Create all catalog tables that do not exist yet."""
    service = get_db_session_service()
    DbManageService(service.engine).create_all()
    console.print(f"[green]✅ Tables created in {get_config().database.url}[/green]")


@db_app.command("check")
def check_database() -> None:
    """Verify that the configured database answers."""
    if get_db_session_service().health_check():
        console.print("[green]✅ Database is reachable[/green]")
        return
    console.print("[red]❌ Database is not reachable[/red]")
    raise typer.Exit(1)
