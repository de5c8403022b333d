"""Correlation IDs for tracing one ledger request through its log lines.

The id is held in a contextvar, so it survives the awaits between the
HTTP middleware, the ledger facade and the port adapters. The structlog
processor below stamps it onto every entry once a request has begun.
"""

from contextvars import ContextVar
from typing import Any
from uuid import uuid4

_correlation_id: ContextVar[str] = ContextVar("ledger_correlation_id", default="")


def generate_correlation_id() -> str:
    return uuid4().hex


def begin_request(correlation_id: str | None = None) -> str:
    """Start a traced request, reusing the caller's id when one is given.

    Returns:
        The correlation id now active in this context.
    """
    active = correlation_id or generate_correlation_id()
    _correlation_id.set(active)
    return active


def get_correlation_id() -> str:
    """Return the active correlation id ("" outside a request)."""
    return _correlation_id.get()


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor: add ``correlation_id`` when a request is active."""
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    return event_dict
