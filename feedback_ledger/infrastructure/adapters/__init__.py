"""Production adapters for the ledger's application ports."""

from feedback_ledger.infrastructure.adapters.sequence_clock import SequenceClock

__all__: list[str] = ["SequenceClock"]
