"""Logging configuration for zexasim.

Structured logging with structlog: colored-free console output by default,
JSON lines when ``ZEXASIM_JSON_LOGS`` is set.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

from zexasim.core.settings import get_settings

# Log file location
LOG_DIR = Path(__file__).parent.parent.parent / "logs"
LOG_FILE = LOG_DIR / "zexasim.log"

_configured: bool = False


def _build_handlers() -> list[logging.Handler]:
    """Stdout handler, plus a rotating file handler outside of pytest runs."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if os.environ.get("PYTEST_CURRENT_TEST"):
        return handlers

    try:
        LOG_DIR.mkdir(exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                str(LOG_FILE), maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
            )
        )
    except OSError:
        # Read-only deployments log to stdout only
        pass
    return handlers


def configure_logging(
    level: str | None = None,
    json_output: bool | None = None,
) -> structlog.BoundLogger:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to settings.log_level.
        json_output: Render JSON instead of console lines. Defaults to settings.json_logs.

    Returns:
        Configured logger instance.
    """
    global _configured

    if _configured:
        return structlog.get_logger()

    settings = get_settings()
    log_level = (level or settings.log_level).upper()
    numeric_level = getattr(logging, log_level, logging.INFO)
    if json_output is None:
        json_output = settings.json_logs

    logging.basicConfig(
        format="%(message)s",
        level=numeric_level,
        handlers=_build_handlers(),
        force=True,
    )

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    _configured = True
    return structlog.get_logger()


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger, lazily configuring logging on first use.

    Args:
        name: Optional logger name (usually module name).
    """
    if not _configured:
        configure_logging()

    logger = structlog.get_logger()
    if name:
        return logger.bind(logger_name=name)
    return logger
