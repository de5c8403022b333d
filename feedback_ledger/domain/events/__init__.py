"""Ledger event records."""

from feedback_ledger.domain.events.ledger import (
    AUTHORITY_SET_EVENT_TYPE,
    MAX_FEEDBACK_LENGTH_UPDATED_EVENT_TYPE,
    MAX_SUBMISSIONS_UPDATED_EVENT_TYPE,
    MIN_FEEDBACK_LENGTH_UPDATED_EVENT_TYPE,
    RATE_LIMIT_UPDATED_EVENT_TYPE,
    SUBMISSION_CREATED_EVENT_TYPE,
    SUBMISSION_DEACTIVATED_EVENT_TYPE,
    SUBMISSION_EVENT_TYPES,
    SUBMISSION_FEE_UPDATED_EVENT_TYPE,
    SUBMISSION_UPDATED_EVENT_TYPE,
    SUBMISSION_VERIFIED_EVENT_TYPE,
    LedgerEvent,
)

__all__: list[str] = [
    "AUTHORITY_SET_EVENT_TYPE",
    "MAX_FEEDBACK_LENGTH_UPDATED_EVENT_TYPE",
    "MAX_SUBMISSIONS_UPDATED_EVENT_TYPE",
    "MIN_FEEDBACK_LENGTH_UPDATED_EVENT_TYPE",
    "RATE_LIMIT_UPDATED_EVENT_TYPE",
    "SUBMISSION_CREATED_EVENT_TYPE",
    "SUBMISSION_DEACTIVATED_EVENT_TYPE",
    "SUBMISSION_EVENT_TYPES",
    "SUBMISSION_FEE_UPDATED_EVENT_TYPE",
    "SUBMISSION_UPDATED_EVENT_TYPE",
    "SUBMISSION_VERIFIED_EVENT_TYPE",
    "LedgerEvent",
]
