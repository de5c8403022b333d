"""Ledger event emitter stub.

Captures emitted events in memory. Serves as the development emitter: each
accepted event is also appended to ``event_log`` as its canonical signable
bytes, the same form an external witness would sign. Lets tests assert on
events or simulate emitter failure.

Usage in tests:
    emitter = LedgerEventEmitterStub()
    ...
    assert [e.event_type for e in emitter.emitted_events] == ["submission-created"]
"""

from __future__ import annotations

from feedback_ledger.application.ports.ledger_event_emitter import (
    LedgerEventEmitterPort,
)
from feedback_ledger.domain.events.ledger import LedgerEvent


class LedgerEventEmitterStub(LedgerEventEmitterPort):
    """In-memory event sink.

    Attributes:
        emitted_events: Every event accepted so far, in order.
        event_log: Canonical bytes of each accepted event, in order.
        should_fail: If True, emit() returns False without recording.
        fail_exception: If set, emit() raises it.
    """

    def __init__(self) -> None:
        self.emitted_events: list[LedgerEvent] = []
        self.event_log: list[bytes] = []
        self.should_fail: bool = False
        self.fail_exception: Exception | None = None

    async def emit(self, event: LedgerEvent) -> bool:
        if self.fail_exception is not None:
            raise self.fail_exception
        if self.should_fail:
            return False
        self.event_log.append(event.signable_content())
        self.emitted_events.append(event)
        return True

    def events_for(self, submission_id: int) -> list[LedgerEvent]:
        """Return events recorded for one submission."""
        return [e for e in self.emitted_events if e.submission_id == submission_id]

    def reset(self) -> None:
        """Clear captured events, the log and failure switches."""
        self.emitted_events.clear()
        self.event_log.clear()
        self.should_fail = False
        self.fail_exception = None
