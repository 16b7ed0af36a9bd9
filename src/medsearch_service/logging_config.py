"""Structured logging configuration using structlog.

Events use dotted names (``search.rank.completed``) with key/value context.
Raw user queries are logged through ``truncate_queries`` so a pasted
document never lands whole in the log stream.

Usage:
    from medsearch_service.logging_config import configure_logging, get_logger

    # In main.py startup
    configure_logging()

    # In application code
    logger = get_logger(__name__)
    logger.info("search.rank.completed", candidates=42, query="htn")
"""

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

MAX_LOGGED_QUERY_LENGTH = 100

# Event keys holding raw user input
QUERY_KEYS = ("query", "term")


def truncate_queries(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Cut user-supplied query values to ``MAX_LOGGED_QUERY_LENGTH`` characters."""
    for key in QUERY_KEYS:
        value = event_dict.get(key)
        if isinstance(value, str) and len(value) > MAX_LOGGED_QUERY_LENGTH:
            event_dict[key] = value[:MAX_LOGGED_QUERY_LENGTH] + "..."
    return event_dict


def configure_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_logs: If True, output JSON logs for log aggregation. If False,
                   use human-readable console output for development.

    Processor Pipeline:
    1. Merge request-scoped context variables
    2. Add log level and logger name
    3. Truncate raw queries
    4. Add timestamp (ISO8601 UTC)
    5. Add callsite info (file, function, line)
    6. Format as console or JSON
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
    )

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        truncate_queries,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
    ]

    if json_logs:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stdout.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Get a structured logger instance (a ``structlog.stdlib.BoundLogger``)."""
    return structlog.get_logger(name)
