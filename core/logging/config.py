"""Structlog setup: JSON lines to a rotating file, colored lines to stderr."""

import logging
import logging.handlers
import os
import time
from pathlib import Path

import structlog

from core.logging.filters import RequestIDFilter
from core.logging.processors import (
    add_process_info,
    add_request_context,
    add_service_context,
    console_renderer,
)

DEFAULT_LOG_FILE = "./logs/shop-service.log"

# Library loggers that are too chatty at INFO
_QUIET_LOGGERS = ("django.db.backends", "urllib3", "asyncio")


def _log_file_path() -> str:
    return os.getenv("LOG_FILE_PATH", DEFAULT_LOG_FILE)


def _shared_processors() -> list:
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_request_context,
        add_service_context,
        add_process_info,
    ]


def setup_logging() -> None:
    """Configure structlog and the root logger.

    Environment variables:
    - LOG_FILE_PATH: JSON log file (default: ./logs/shop-service.log)
    - LOG_LEVEL: Minimum level (default: INFO)
    - LOG_MAX_BYTES: Size at which the file rotates (default: 50 MB)
    - LOG_BACKUP_COUNT: Rotated files kept (default: 20)

    Stdlib loggers (Django, middleware, health checks) go through the same
    handlers, so every line carries the request id and service metadata.
    """
    log_file_path = _log_file_path()
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_file_path,
        maxBytes=int(os.getenv("LOG_MAX_BYTES", str(50 * 1024 * 1024))),
        backupCount=int(os.getenv("LOG_BACKUP_COUNT", "20")),
        encoding="utf-8",
    )
    file_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
            foreign_pre_chain=_shared_processors(),
        )
    )

    console_handler = logging.StreamHandler()
    console_handler.addFilter(RequestIDFilter())
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=console_renderer,
            foreign_pre_chain=_shared_processors(),
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    for handler in (file_handler, console_handler):
        handler.setLevel(level)
        root_logger.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    structlog.get_logger(__name__).info(
        "Logging configured", log_file=log_file_path, log_level=level_name
    )


def cleanup_old_logs(
    log_file_path: str | None = None, retention_days: int = 10
) -> int:
    """Delete rotated log files older than ``retention_days``.

    The active log file is never touched.

    Args:
        log_file_path: Active log file; defaults to LOG_FILE_PATH.
        retention_days: Age in days after which rotated files are removed.

    Returns:
        Number of files deleted.
    """
    active = Path(log_file_path or _log_file_path())
    cutoff = time.time() - retention_days * 24 * 60 * 60
    logger = structlog.get_logger(__name__)

    deleted = 0
    for rotated in active.parent.glob(f"{active.name}.*"):
        if rotated.stat().st_mtime >= cutoff:
            continue
        try:
            rotated.unlink()
        except OSError as e:
            logger.warning(
                "Failed to delete old log file", file=str(rotated), error=str(e)
            )
            continue
        deleted += 1

    if deleted:
        logger.info(
            "Cleaned up old log files",
            deleted_count=deleted,
            retention_days=retention_days,
        )
    return deleted
