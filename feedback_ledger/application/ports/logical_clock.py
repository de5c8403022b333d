"""Logical Clock Port - source of submission and amendment timestamps.

The execution environment supplies a monotonically non-decreasing integer
clock (a block height, a sequence number, ...). Services MUST read time
through this port instead of the wall clock, which keeps every timestamp
reproducible and lets tests control time exactly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class LogicalClockProtocol(ABC):
    """Abstract interface for the logical clock."""

    @abstractmethod
    def now(self) -> int:
        """Return the current logical time.

        Returns:
            Non-negative integer, never smaller than a previous reading.
        """
        ...

    def begin_operation(self) -> None:
        """Called once at the start of every mutating ledger operation.

        Clocks driven from outside the ledger ignore it. A clock that
        counts operations advances here, so every reading taken during
        one operation is the same value.
        """
        return None
