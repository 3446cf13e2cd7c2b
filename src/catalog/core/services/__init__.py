"""Core services exports."""

from .catalog import CategoryService, ProductService
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

__all__ = [
    "CategoryService",
    "DbManageService",
    "DbSessionService",
    "ProductService",
]
