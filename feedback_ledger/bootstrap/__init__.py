"""Bootstrap wiring for the Feedback Ledger."""

from feedback_ledger.bootstrap.ledger import LedgerComponents, build_ledger
from feedback_ledger.bootstrap.logging import configure_logging
from feedback_ledger.bootstrap.metrics import (
    get_metrics_collector,
    reset_metrics,
    set_metrics_collector,
)

__all__: list[str] = [
    "LedgerComponents",
    "build_ledger",
    "configure_logging",
    "get_metrics_collector",
    "reset_metrics",
    "set_metrics_collector",
]
