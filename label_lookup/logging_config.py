"""Logging setup for the Label Lookup API.

Every lookup outcome, outbound Elasticsearch call and lifecycle step is logged
as a structured event carrying an ``event_type`` field (``label_lookup_failed``,
``label_not_found``, ``http_request``, ``app_startup`` ...). The JSON file log
keeps those fields queryable; the console gets a plain one-line format.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from pythonjsonlogger import jsonlogger

LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE_NAME = "label_lookup.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

# Chatty libraries: their own request lines duplicate our http_request events
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def setup_logging(log_level: str = "INFO", log_dir: Path | None = None) -> logging.Logger:
    """Route all application logs to a rotating JSON file and stdout.

    The file handler always records DEBUG so failed lookups keep their full
    context; the console follows ``log_level``. Unknown level names fall back
    to INFO.

    Args:
        log_level: Console and root level name (e.g. "DEBUG", "INFO")
        log_dir: Directory for label_lookup.log (defaults to ./logs)

    Returns:
        The configured root logger
    """
    log_dir = log_dir or LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    file_handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d",
            timestamp=True,
        )
    )
    file_handler.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Module logger; pass ``__name__``."""
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log ``message`` with structured fields such as label_name, index or event_type.

    Field names must not collide with LogRecord attributes (``name``,
    ``message``, ``args`` ...), which is why lookups log ``label_name``.
    """
    getattr(logger, level.lower())(message, extra=extra_fields)
