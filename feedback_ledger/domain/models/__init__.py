"""Domain models for the Feedback Ledger."""

from feedback_ledger.domain.models.amendment import AmendmentRecord
from feedback_ledger.domain.models.identity import (
    BURN_IDENTITY,
    Identity,
    is_reserved_identity,
)
from feedback_ledger.domain.models.ledger_configuration import (
    ConfigurationSnapshot,
    LedgerConfiguration,
)
from feedback_ledger.domain.models.submission import (
    TERMINAL_STATES,
    FeedbackCategory,
    FeedbackLanguage,
    SubmissionCandidate,
    SubmissionRecord,
    SubmissionState,
)

__all__: list[str] = [
    "BURN_IDENTITY",
    "TERMINAL_STATES",
    "AmendmentRecord",
    "ConfigurationSnapshot",
    "FeedbackCategory",
    "FeedbackLanguage",
    "Identity",
    "LedgerConfiguration",
    "SubmissionCandidate",
    "SubmissionRecord",
    "SubmissionState",
    "is_reserved_identity",
]
