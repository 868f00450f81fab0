"""
Logging configuration using structlog
"""

import logging
import secrets
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

import structlog

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_operation_name: ContextVar[str | None] = ContextVar("operation_name", default=None)


def add_request_context(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Processor tagging every event with the current request id and GraphQL operation."""
    request_id = _request_id.get()
    if request_id:
        event_dict.setdefault("request_id", request_id)

    operation_name = _operation_name.get()
    if operation_name:
        event_dict.setdefault("graphql_operation", operation_name)

    return event_dict


def configure_logging(debug: bool = False) -> None:
    """Route structlog through stdlib logging on stdout.

    Debug mode renders colored console lines at DEBUG level; otherwise events
    are JSON at INFO level.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True) if debug else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_request_context,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


@contextmanager
def request_context(operation_name: str | None = None) -> Iterator[str]:
    """Bind a fresh request id (and the operation name, if any) for the duration of a request."""
    request_id = secrets.token_urlsafe(8)
    id_token = _request_id.set(request_id)
    operation_token = _operation_name.set(operation_name)
    try:
        yield request_id
    finally:
        _operation_name.reset(operation_token)
        _request_id.reset(id_token)
