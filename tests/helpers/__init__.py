"""Test helpers for Feedback Ledger tests.

Helpers:
    make_candidate: SubmissionCandidate with valid defaults
    make_record: SubmissionRecord with valid defaults
    submit_valid: File a valid submission through FeedbackLedgerService
    submission_payload: JSON body for POST /v1/ledger/submissions

Usage:
    from tests.helpers import make_candidate, submit_valid
"""

from tests.helpers.ledger_factories import (
    ALICE,
    AUTHORITY,
    BOB,
    VALID_FEEDBACK,
    make_candidate,
    make_record,
    submission_payload,
    submit_valid,
)

__all__ = [
    "ALICE",
    "AUTHORITY",
    "BOB",
    "VALID_FEEDBACK",
    "make_candidate",
    "make_record",
    "submission_payload",
    "submit_valid",
]
