"""Schema management for the catalog database."""

from loguru import logger
from sqlalchemy import Engine
from sqlmodel import SQLModel


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all database tables."""
        # Table models register themselves with the metadata on import
        from src.catalog.entities.catalog.category import CategoryTable  # noqa: F401
        from src.catalog.entities.catalog.product import (  # noqa: F401
            ProductCategoryLink,
            ProductTable,
        )

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables: {}", sorted(SQLModel.metadata.tables))

    def drop_all(self) -> None:
        """Drop all catalog tables."""
        SQLModel.metadata.drop_all(self._engine)
        logger.warning("Dropped all catalog tables")
