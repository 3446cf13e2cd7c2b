"""Loguru setup shared by the API and the CLI.

Every record carries the request context bound by the HTTP middleware
(``request_id``, ``method``, ``path``). Records written outside a request,
such as startup messages or CLI output, show ``-`` for those fields.
"""

import logging
import sys
from pathlib import Path

from loguru import logger

from src.catalog.runtime.config.config_data import LoggingConfig
from src.catalog.runtime.context import get_config

REQUEST_DEFAULTS = {"request_id": "-", "method": "-", "path": "-"}

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "[<cyan>{extra[request_id]}</cyan>] {extra[method]} {extra[path]} | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# Third-party loggers and the level they are capped at; SQL echo is
# controlled separately through DatabaseConfig.echo
LIBRARY_LEVELS = {
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
    "uvicorn": logging.INFO,
    "uvicorn.error": logging.INFO,
    "uvicorn.access": logging.CRITICAL,
}


class InterceptHandler(logging.Handler):
    """Send stdlib ``logging`` records (uvicorn, SQLAlchemy) through loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # log_requests already records every request
        if record.name == "uvicorn.access":
            return

        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Attribute the record to the caller, not to the logging module
        frame, depth = logging.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def _add_file_sink(cfg: LoggingConfig, diagnose: bool) -> None:
    path = Path(cfg.file)
    path.parent.mkdir(parents=True, exist_ok=True)

    # serialize=True writes the whole record as one JSON line, ignoring the format
    as_json = cfg.format == "json"
    logger.add(
        str(path),
        level=cfg.level,
        format="{message}" if as_json else CONSOLE_FORMAT,
        colorize=False,
        serialize=as_json,
        rotation=f"{cfg.max_size_mb} MB",
        retention=cfg.backup_count,
        enqueue=True,
        backtrace=diagnose,
        diagnose=diagnose,
    )


def configure_logging(cfg: LoggingConfig | None = None, environment: str | None = None) -> None:
    """Install the console and file sinks and take over stdlib logging.

    Defaults to the logging section and environment of the current config.
    Exception tracebacks include local variables outside production.
    """
    config = get_config()
    cfg = cfg or config.logging
    environment = environment or config.app.environment
    diagnose = environment != "production"

    logger.remove()
    logger.configure(extra=REQUEST_DEFAULTS)

    logger.add(
        sys.stderr,
        level=cfg.level,
        format=CONSOLE_FORMAT,
        colorize=True,
        backtrace=diagnose,
        diagnose=diagnose,
    )
    if cfg.file:
        _add_file_sink(cfg, diagnose)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in list(logging.root.manager.loggerDict):
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers = []
        stdlib_logger.propagate = True
    for name, level in LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(level)

    logger.info(
        "Logging configured level={} format={} file={} environment={}",
        cfg.level,
        cfg.format,
        cfg.file,
        environment,
    )
