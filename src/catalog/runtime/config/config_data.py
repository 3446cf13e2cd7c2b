"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, model_validator


class CORSConfig(BaseModel):
    """CORS configuration for the application."""

    origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:3001"]
    )
    allow_credentials: bool = True
    allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default=["*"])


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="json", description="Log format")
    file: str | None = Field(default="logs/app.log", description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./catalog.db",
        description="Database connection URL",
    )
    pool_size: int = Field(default=20, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    echo: bool = Field(default=False, description="Echo SQL statements")
    create_tables_on_startup: bool = Field(
        default=False, description="Create missing tables when the API starts"
    )
    password_env_var: str | None = Field(
        default=None,
        description="Environment variable name containing database password",
    )

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def connection_string(self) -> str:
        """Construct the database connection string with password if provided."""
        from sqlalchemy.engine import make_url

        base_url = make_url(self.url)
        if not self.password_env_var:
            return self.url

        import os

        password = os.getenv(self.password_env_var)
        if not password:
            raise ValueError(f"Environment variable {self.password_env_var} not set")

        if base_url.password and base_url.password != password:
            logger.warning(
                "Database password in URL does not match the one from {}; using the environment value",
                self.password_env_var,
            )
        # render_as_string keeps the password instead of masking it
        return base_url.set(password=password).render_as_string(hide_password=False)


class PaginationConfig(BaseModel):
    """Defaults applied to paged listing endpoints."""

    default_page_size: int = Field(default=12, description="Page size when none is requested")
    max_page_size: int = Field(default=100, description="Largest page size accepted")

    @model_validator(mode="after")
    def _check_sizes(self) -> PaginationConfig:
        if self.default_page_size < 1:
            raise ValueError("default_page_size must be at least 1")
        if self.max_page_size < self.default_page_size:
            raise ValueError("max_page_size must not be smaller than default_page_size")
        return self


class AppConfig(BaseModel):
    """Application configuration model."""

    name: str = Field(default="catalog", description="Service name")
    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=8000, description="Application port")
    cors: CORSConfig = Field(
        default_factory=CORSConfig, description="CORS configuration"
    )

    @property
    def base_url(self) -> str:
        """Construct the base URL from host and port."""
        scheme = "https" if self.environment == "production" else "http"
        return f"{scheme}://{self.host}:{self.port}"


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    pagination: PaginationConfig = Field(
        default_factory=PaginationConfig, description="Pagination defaults"
    )
    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
