"""Bootstrap wiring for operational metrics."""

from __future__ import annotations

from feedback_ledger.infrastructure.monitoring.ledger_metrics import (
    METRICS_CONTENT_TYPE,
    LedgerMetricsCollector,
    get_ledger_metrics,
    reset_ledger_metrics,
)

_metrics_collector: LedgerMetricsCollector | None = None


def get_metrics_collector() -> LedgerMetricsCollector:
    """Get the metrics collector instance."""
    global _metrics_collector
    if _metrics_collector is None:
        _metrics_collector = get_ledger_metrics()
    return _metrics_collector


def set_metrics_collector(collector: LedgerMetricsCollector) -> None:
    """Set custom metrics collector (testing/override)."""
    global _metrics_collector
    _metrics_collector = collector


def get_metrics_content_type() -> str:
    return METRICS_CONTENT_TYPE


def reset_metrics() -> None:
    """Reset metrics singletons (testing cleanup)."""
    global _metrics_collector
    _metrics_collector = None
    reset_ledger_metrics()
