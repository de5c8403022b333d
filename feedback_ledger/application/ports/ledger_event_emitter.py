"""Ledger Event Emitter Port - outbound event records for indexers.

Emission happens after the state change is applied. A failing emitter must
not undo a completed ledger operation: the service logs the failure and
returns the operation's result.
"""

from __future__ import annotations

from typing import Protocol

from feedback_ledger.domain.events.ledger import LedgerEvent


class LedgerEventEmitterPort(Protocol):
    """Protocol for publishing ledger events."""

    async def emit(self, event: LedgerEvent) -> bool:
        """Publish one ledger event.

        Args:
            event: The event to publish.

        Returns:
            True if the event was published, False otherwise.
        """
        ...
