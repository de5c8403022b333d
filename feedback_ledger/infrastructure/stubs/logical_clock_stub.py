"""Manually advanced logical clock.

Deterministic clock for tests: it ignores ``begin_operation`` and moves
only through ``advance`` or ``set_time``. The value never moves backwards.
"""

from __future__ import annotations

from feedback_ledger.application.ports.logical_clock import LogicalClockProtocol


class LogicalClockStub(LogicalClockProtocol):
    """Integer clock that only changes when told to.

    Usage:
        clock = LogicalClockStub()
        clock.now()        # 0
        clock.advance(5)
        clock.now()        # 5
    """

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        self._time = start

    def now(self) -> int:
        return self._time

    def advance(self, ticks: int = 1) -> int:
        """Move the clock forward and return the new value.

        Raises:
            ValueError: If ticks is negative.
        """
        if ticks < 0:
            raise ValueError(f"ticks must be non-negative, got {ticks}")
        self._time += ticks
        return self._time

    def set_time(self, value: int) -> None:
        """Jump to an absolute time.

        Raises:
            ValueError: If value is earlier than the current time.
        """
        if value < self._time:
            raise ValueError(
                f"logical clock cannot move backwards ({value} < {self._time})"
            )
        self._time = value
