"""Unit tests for the operation-sequence logical clock."""

import pytest

from feedback_ledger.application.ports.logical_clock import LogicalClockProtocol
from feedback_ledger.infrastructure.adapters import SequenceClock
from feedback_ledger.infrastructure.stubs import LogicalClockStub


class TestSequenceClock:
    """Tests for SequenceClock."""

    def test_is_logical_clock(self) -> None:
        assert isinstance(SequenceClock(), LogicalClockProtocol)

    def test_ticks_once_per_operation(self) -> None:
        clock = SequenceClock()

        assert clock.now() == 0
        clock.begin_operation()
        assert clock.now() == 1
        assert clock.now() == 1
        clock.begin_operation()
        assert clock.now() == 2

    def test_custom_start(self) -> None:
        clock = SequenceClock(start=40)
        clock.begin_operation()

        assert clock.now() == 41

    def test_negative_start_rejected(self) -> None:
        with pytest.raises(ValueError):
            SequenceClock(start=-1)


class TestManualClockIgnoresOperations:
    """The manual clock only moves when told to."""

    def test_begin_operation_is_noop(self) -> None:
        clock = LogicalClockStub(start=7)
        clock.begin_operation()

        assert clock.now() == 7
