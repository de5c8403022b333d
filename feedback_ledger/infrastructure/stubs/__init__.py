"""In-memory implementations of the application ports.

Used for development wiring and as test doubles.
"""

from feedback_ledger.infrastructure.stubs.identity_registry_stub import (
    IdentityRegistryStub,
)
from feedback_ledger.infrastructure.stubs.ledger_event_emitter_stub import (
    LedgerEventEmitterStub,
)
from feedback_ledger.infrastructure.stubs.logical_clock_stub import LogicalClockStub
from feedback_ledger.infrastructure.stubs.submission_repository_stub import (
    SubmissionRepositoryStub,
)
from feedback_ledger.infrastructure.stubs.value_transfer_stub import (
    TransferRecord,
    ValueTransferStub,
)

__all__: list[str] = [
    "IdentityRegistryStub",
    "LedgerEventEmitterStub",
    "LogicalClockStub",
    "SubmissionRepositoryStub",
    "TransferRecord",
    "ValueTransferStub",
]
