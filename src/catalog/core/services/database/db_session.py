"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import Engine, StaticPool, text
from sqlmodel import Session, create_engine

from src.catalog.core.services.database.db_utils import enable_sqlite_foreign_keys
from src.catalog.runtime.config.config_data import DatabaseConfig
from src.catalog.runtime.context import get_config


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig | None = None, engine: Engine | None = None):
        """Initialize the shared database engine and session factory.

        An already built ``engine`` may be passed in (tests do this with an
        in-memory SQLite engine); otherwise one is created from ``db_config``
        or, failing that, from the current application configuration.
        """
        if engine is not None:
            self._engine = engine
            return

        main_config = get_config()
        db_config = db_config or main_config.database

        logger.info("Configuring database engine for environment: {}", main_config.app.environment)
        engine_kwargs = self._get_engine_kwargs(db_config)

        self._engine = create_engine(db_config.connection_string, **engine_kwargs)
        if db_config.is_sqlite:
            enable_sqlite_foreign_keys(self._engine)

            if main_config.app.environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )

        logger.info("Database engine initialized for {}", self._engine.url.render_as_string(hide_password=True))

    @property
    def engine(self) -> Engine:
        return self._engine

    def _get_engine_kwargs(self, db_config: DatabaseConfig) -> dict[str, Any]:
        """Get database-specific engine arguments."""
        engine_kwargs: dict[str, Any] = {"echo": db_config.echo}

        if db_config.is_sqlite:
            engine_kwargs["connect_args"] = {
                "check_same_thread": False,  # Sessions are used from FastAPI's threadpool
                "timeout": 20,  # Lock timeout
            }
            if ":memory:" in db_config.url:
                # One shared connection, otherwise every session sees an empty database
                engine_kwargs["poolclass"] = StaticPool
            return engine_kwargs

        engine_kwargs.update(
            {
                "pool_size": db_config.pool_size,
                "max_overflow": db_config.max_overflow,
                "pool_timeout": db_config.pool_timeout,
                "pool_recycle": db_config.pool_recycle,
                "pool_pre_ping": True,  # Validate connections before use
            }
        )
        return engine_kwargs

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,  # DTOs are built after commit in some paths
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Transaction scope: commit on success, roll back on any error."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.bind(
                error_type=type(e).__name__,
                error_message=str(e),
            ).debug("Database transaction rolled back")
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.bind(
                error_type=type(e).__name__,
                error_message=str(e),
            ).error("Database health check failed")
            return False

    def dispose(self) -> None:
        self._engine.dispose()
