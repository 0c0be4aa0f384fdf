"""
Module: logger.py
Description: structlog setup for KeyAuth.

Library modules only call get_logger(); they never configure structlog,
so a host application keeps control of its own logging pipeline.
Entry points owned by this package (scripts/generate_api_key.py) call
configure_logging() to get JSON events on stderr, filtered by
settings.log_level.

Key Components:
- configure_logging(): JSON renderer on stderr with level filtering
- get_logger(): Logger for a module

Dependencies: structlog, logging, sys, datetime
Author: KeyAuth Team
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Optional

import structlog
from structlog.typing import FilteringBoundLogger

from src.config.settings import settings


def _add_timestamp(logger, method_name, event_dict):
    """Stamp the event with the current UTC time in ISO 8601."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _add_log_level(logger, method_name, event_dict):
    event_dict["level"] = method_name.upper()
    return event_dict


def _stderr_logger_factory(*args) -> structlog.WriteLogger:
    # sys.stderr is looked up per logger so redirected streams are honoured
    return structlog.WriteLogger(sys.stderr)


def configure_logging(log_level: Optional[str] = None) -> None:
    """
    Configure structlog to write JSON events to stderr.

    Stdout stays free for program output such as generated keys.

    Args:
        log_level: Minimum level name; defaults to settings.log_level
    """
    level = logging.getLevelName((log_level or settings.log_level).upper())

    structlog.configure(
        processors=[
            _add_timestamp,
            _add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=_stderr_logger_factory,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a structlog logger for a module.

    Uses whatever configuration the host (or configure_logging())
    has installed when the logger is first used.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("API key created", prefix="sk_", key_length=51)
    """
    return structlog.get_logger(name)
