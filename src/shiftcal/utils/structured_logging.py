"""
Structured Logging
==================
structlog integration for the CLI and the Streamlit UI.

Usage:
    from shiftcal.utils.structured_logging import get_structured_logger

    log = get_structured_logger("shiftcal.cli")
    log.info("month_exported", month="2025-07", path="july.xlsx")
"""
import logging
from typing import Any, Optional, TextIO

import structlog
import structlog.contextvars


def configure_structlog(
    json_output: bool = False,
    level: int = logging.INFO,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure structlog for the application.

    Args:
        json_output: If True, output JSON logs (for production).
                    If False, use colored console output (for development).
        level: Minimum level let through by the bound loggers.
        stream: Where events are printed (default: stdout).
    """
    if json_output:
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.processors.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(stream),
            cache_logger_on_first_use=False,
        )
    else:
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.processors.add_log_level,
                structlog.processors.TimeStamper(fmt="%H:%M:%S"),
                structlog.dev.ConsoleRenderer(colors=True),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(stream),
            cache_logger_on_first_use=False,
        )


def get_structured_logger(name: str) -> Any:
    """Get a structlog logger bound to ``name``."""
    return structlog.get_logger(name)


def bind_context(**kwargs) -> None:
    """
    Bind context variables for all subsequent log calls.

    Args:
        **kwargs: Context values (e.g., session="abc123")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()
