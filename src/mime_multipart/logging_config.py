"""
Structured logging for the codec, built on structlog.

Library modules only ever call ``structlog.get_logger(__name__)``; entry points
(the split CLI, test sessions) decide rendering by calling ``setup_logging``.
"""

import logging
import sys
from typing import Optional

import structlog

from .config import settings


def setup_logging(level: Optional[str] = None, json_output: Optional[bool] = None) -> None:
    """
    Configure structlog processors and rendering.

    Args:
        level: Minimum level name; defaults to ``settings.log_level``
        json_output: Render JSON lines instead of console output;
            defaults to ``settings.log_json``
    """
    level_name = (level or settings.log_level).upper()
    as_json = settings.log_json if json_output is None else json_output

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer() if as_json else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level_name)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
