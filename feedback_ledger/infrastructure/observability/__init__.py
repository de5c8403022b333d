"""Observability for the ledger: structlog setup and request correlation."""

from feedback_ledger.infrastructure.observability.correlation import (
    begin_request,
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
)
from feedback_ledger.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
)

__all__: list[str] = [
    "begin_request",
    "configure_structlog",
    "correlation_id_processor",
    "generate_correlation_id",
    "get_correlation_id",
    "get_logger_for_service",
]
