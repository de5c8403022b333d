"""Prometheus metrics for ledger operations.

Operational counters only: accepted submissions, rejections by error kind,
fees collected and lifecycle transitions. Each collector owns its own
CollectorRegistry so tests can build isolated instances.

Labels: service, environment (from SERVICE_NAME / ENVIRONMENT).
"""

import os
import threading

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    generate_latest,
)

METRICS_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"

_collector_lock = threading.Lock()


class LedgerMetricsCollector:
    """Collects operational metrics for one ledger instance.

    Attributes:
        submissions_accepted_total: Counter of accepted submissions.
        operations_rejected_total: Counter of rejected operations, labelled
            by operation and error kind.
        fees_collected_total: Counter of fee amounts routed to the authority.
        lifecycle_transitions_total: Counter of amend/verify/deactivate.
        submissions_stored: Gauge of records currently in the ledger.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize the collector.

        Args:
            registry: Optional custom registry for testing isolation.
        """
        self._registry = registry or CollectorRegistry()
        self._environment = os.environ.get("ENVIRONMENT", "development")
        self._service_name = os.environ.get("SERVICE_NAME", "feedback-ledger")

        self.submissions_accepted_total = Counter(
            name="ledger_submissions_accepted_total",
            documentation="Total accepted feedback submissions",
            labelnames=["service", "environment"],
            registry=self._registry,
        )
        self.operations_rejected_total = Counter(
            name="ledger_operations_rejected_total",
            documentation="Total rejected ledger operations",
            labelnames=["service", "environment", "operation", "error_kind"],
            registry=self._registry,
        )
        self.fees_collected_total = Counter(
            name="ledger_fees_collected_total",
            documentation="Total fee amount transferred to the authority",
            labelnames=["service", "environment"],
            registry=self._registry,
        )
        self.lifecycle_transitions_total = Counter(
            name="ledger_lifecycle_transitions_total",
            documentation="Total post-submission transitions",
            labelnames=["service", "environment", "transition"],
            registry=self._registry,
        )
        self.submissions_stored = Gauge(
            name="ledger_submissions_stored",
            documentation="Number of submissions held by the ledger",
            labelnames=["service", "environment"],
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        return self._registry

    def record_submission_accepted(self, fee: int, stored: int) -> None:
        """Record one accepted submission and the fee it paid."""
        labels = {"service": self._service_name, "environment": self._environment}
        self.submissions_accepted_total.labels(**labels).inc()
        if fee > 0:
            self.fees_collected_total.labels(**labels).inc(fee)
        self.submissions_stored.labels(**labels).set(stored)

    def record_rejection(self, operation: str, error_kind: str) -> None:
        """Record a rejected operation."""
        self.operations_rejected_total.labels(
            service=self._service_name,
            environment=self._environment,
            operation=operation,
            error_kind=error_kind,
        ).inc()

    def record_transition(self, transition: str) -> None:
        """Record an amend, verify or deactivate transition."""
        self.lifecycle_transitions_total.labels(
            service=self._service_name,
            environment=self._environment,
            transition=transition,
        ).inc()

    def generate(self) -> bytes:
        """Render this collector's registry in Prometheus text format."""
        return generate_latest(self._registry)


_metrics_collector: LedgerMetricsCollector | None = None


def get_ledger_metrics() -> LedgerMetricsCollector:
    """Get the process-wide collector, creating it on first use."""
    global _metrics_collector
    if _metrics_collector is None:
        with _collector_lock:
            if _metrics_collector is None:
                _metrics_collector = LedgerMetricsCollector()
    return _metrics_collector


def reset_ledger_metrics() -> None:
    """Drop the process-wide collector (testing cleanup)."""
    global _metrics_collector
    with _collector_lock:
        _metrics_collector = None
