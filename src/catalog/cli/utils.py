"""Shared utilities for CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from sqlmodel import Session

from src.catalog.core.services.database.db_session import DbSessionService

console = Console()


def get_db_session_service() -> DbSessionService:
    """Build the session service from the current configuration."""
    return DbSessionService()


@contextmanager
def cli_session() -> Iterator[Session]:
    with get_db_session_service().session_scope() as session:
        yield session
