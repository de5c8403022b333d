"""Application ports (outbound interfaces) for the Feedback Ledger."""

from feedback_ledger.application.ports.identity_registry import (
    IdentityRegistryProtocol,
)
from feedback_ledger.application.ports.ledger_event_emitter import (
    LedgerEventEmitterPort,
)
from feedback_ledger.application.ports.ledger_metrics import LedgerMetricsProtocol
from feedback_ledger.application.ports.logical_clock import LogicalClockProtocol
from feedback_ledger.application.ports.submission_repository import (
    SubmissionRepositoryProtocol,
)
from feedback_ledger.application.ports.value_transfer import ValueTransferPort

__all__: list[str] = [
    "IdentityRegistryProtocol",
    "LedgerEventEmitterPort",
    "LedgerMetricsProtocol",
    "LogicalClockProtocol",
    "SubmissionRepositoryProtocol",
    "ValueTransferPort",
]
