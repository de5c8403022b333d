"""Ledger metrics port.

Lets the ledger service record operational counters without depending on
a metrics backend. The Prometheus collector in infrastructure.monitoring
satisfies it structurally.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LedgerMetricsProtocol(Protocol):
    """Protocol for ledger operational metrics."""

    def record_submission_accepted(self, fee: int, stored: int) -> None:
        """Record an accepted submission.

        Args:
            fee: Fee collected for it.
            stored: Number of submissions now held.
        """
        ...

    def record_rejection(self, operation: str, error_kind: str) -> None:
        """Record a rejected operation by error kind."""
        ...

    def record_transition(self, transition: str) -> None:
        """Record an amend, verify or deactivate transition."""
        ...
