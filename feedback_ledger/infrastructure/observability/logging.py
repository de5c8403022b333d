"""structlog setup for the ledger.

``ENVIRONMENT=production`` renders one JSON object per line for log
shipping; any other environment gets the colored console renderer. The
minimum level is read from ``LOG_LEVEL`` (default INFO).

A rejected submission, for example, logs as::

    {"event": "operation_rejected", "level": "warning",
     "service": "FeedbackLedgerService", "component": "ledger",
     "operation": "submit_feedback", "error_kind": "RateLimitExceeded",
     "error_code": 107, "correlation_id": "...", "timestamp": "..."}
"""

import logging
import os
from typing import cast

import structlog
from structlog.typing import Processor

from feedback_ledger.infrastructure.observability.correlation import (
    correlation_id_processor,
)


def _level_from_env() -> int:
    name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_structlog(environment: str = "production") -> None:
    """Install the ledger's processor chain. Call once at startup.

    Args:
        environment: "production" selects JSON output.
    """
    renderer: Processor
    if environment == "production":
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            cast(Processor, correlation_id_processor),
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level_from_env()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger_for_service(
    service_name: str, component: str = "ledger"
) -> structlog.BoundLogger:
    """Return a logger bound to a ledger service and its component."""
    return structlog.get_logger().bind(service=service_name, component=component)
