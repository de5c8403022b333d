"""Operation-sequence logical clock.

Stands in for a block height when the ledger is served on its own: time
is the number of mutating operations begun so far. Every operation sees
a value strictly greater than the one before it, and all readings inside
one operation agree, so a submission's ``created_at`` and its event share
a timestamp while a later amendment always lands after it.
"""

from __future__ import annotations

import threading

from feedback_ledger.application.ports.logical_clock import LogicalClockProtocol


class SequenceClock(LogicalClockProtocol):
    """Logical clock that ticks once per mutating operation.

    Attributes:
        _height: Current logical time.
    """

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        self._height = start
        self._lock = threading.Lock()

    def now(self) -> int:
        return self._height

    def begin_operation(self) -> None:
        with self._lock:
            self._height += 1
