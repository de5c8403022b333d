"""Operational monitoring."""

from feedback_ledger.infrastructure.monitoring.ledger_metrics import (
    METRICS_CONTENT_TYPE,
    LedgerMetricsCollector,
    get_ledger_metrics,
    reset_ledger_metrics,
)

__all__: list[str] = [
    "METRICS_CONTENT_TYPE",
    "LedgerMetricsCollector",
    "get_ledger_metrics",
    "reset_ledger_metrics",
]
