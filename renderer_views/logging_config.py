"""Logging setup for Renderer Views.

Two handlers hang off the root logger: a rotating JSON file that always
records DEBUG and up, and a plain console stream filtered at the configured
level. Modules log through :func:`log_with_context` so that view names,
locales and an ``event_type`` land as separate JSON keys.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from pythonjsonlogger import jsonlogger

LOG_FILE_NAME = "renderer_views.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

JSON_FIELDS = "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d"
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Loggers that flood the console at INFO
QUIET_LOGGERS = ("uvicorn.access",)


def _json_file_handler(log_dir: Path) -> logging.Handler:
    handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setFormatter(jsonlogger.JsonFormatter(JSON_FIELDS, timestamp=True))
    handler.setLevel(logging.DEBUG)
    return handler


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler.setLevel(level)
    return handler


def setup_logging(log_level: str = "INFO", log_dir: Path | None = None) -> logging.Logger:
    """Install the JSON file and console handlers on the root logger.

    Calling it again replaces the handlers instead of stacking them.

    Args:
        log_level: Name of the root and console level, e.g. "DEBUG"
        log_dir: Where the JSON log rotates; ``logs/`` beside the package if omitted

    Returns:
        The root logger
    """
    level = getattr(logging, log_level.upper())
    log_dir = log_dir or Path(__file__).parent.parent / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(_json_file_handler(log_dir))
    root.addHandler(_console_handler(level))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root


def get_logger(name: str) -> logging.Logger:
    """Module logger; pass ``__name__``."""
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **extra_fields: Any,
) -> None:
    """Emit ``message`` at ``level`` with ``extra_fields`` attached to the record.

    The JSON handler writes each field as its own key; the console handler
    shows only the message.

    Args:
        logger: Logger to emit on
        level: Lower-case level name, e.g. "debug"
        message: Human-readable message
        **extra_fields: Structured fields such as view_name, locale, event_type
    """
    getattr(logger, level.lower())(message, extra=extra_fields)
