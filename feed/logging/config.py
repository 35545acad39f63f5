"""Structlog configuration: JSON file logs plus colored console logs."""

import logging
import logging.handlers
import os
import time
from pathlib import Path

import structlog

from feed.logging.processors import (
    add_request_context,
    add_service_context,
    console_renderer,
)

DEFAULT_LOG_FILE = "./logs/activity-feed-service.log"
MAX_LOG_FILE_BYTES = 50 * 1024 * 1024
LOG_BACKUP_COUNT = 20


def setup_logging() -> None:
    """Configure structlog for file (JSON) and console (colored) output.

    Environment Variables:
    - LOG_FILE_PATH: Path to the log file (default: ./logs/activity-feed-service.log)
    - LOG_LEVEL: Logging level (default: INFO)
    - SERVICE_NAME: Service name attached to every event
    - ENVIRONMENT: Deployment environment attached to every event
    - LOG_RETENTION_DAYS: Age after which rotated logs are removed (default: 10)
    """
    log_file_path = os.getenv("LOG_FILE_PATH", DEFAULT_LOG_FILE)
    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)

    shared_processors = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_request_context,
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            add_service_context,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_file_path,
        maxBytes=MAX_LOG_FILE_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=[*shared_processors, add_service_context],
        )
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=console_renderer,
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_file=log_file_path,
        log_level=log_level_name,
    )
    cleanup_old_logs(
        log_file_path, retention_days=int(os.getenv("LOG_RETENTION_DAYS", "10"))
    )


def cleanup_old_logs(
    log_file_path: str | None = None, retention_days: int = 10
) -> int:
    """Remove rotated log files older than the retention period.

    Args:
        log_file_path: Path to the main log file. Defaults to LOG_FILE_PATH.
        retention_days: Number of days to retain rotated logs.

    Returns:
        The number of files deleted.
    """
    log_path = Path(log_file_path or os.getenv("LOG_FILE_PATH", DEFAULT_LOG_FILE))
    cutoff = time.time() - retention_days * 24 * 60 * 60
    logger = structlog.get_logger(__name__)

    deleted_count = 0
    for rotated in log_path.parent.glob(f"{log_path.name}.*"):
        if rotated.stat().st_mtime >= cutoff:
            continue
        try:
            rotated.unlink()
            deleted_count += 1
        except OSError as e:
            logger.warning(
                "Failed to delete old log file", file=str(rotated), error=str(e)
            )

    if deleted_count:
        logger.info(
            "Cleaned up old log files",
            deleted_count=deleted_count,
            retention_days=retention_days,
        )
    return deleted_count
