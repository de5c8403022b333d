"""Factories for ledger test data.

Every factory produces a value that passes validation under the
reference policy (min length 10, max length 1000); tests override only
the field they care about.

    >>> candidate = make_candidate(priority=9)          # invalid priority
    >>> record = make_record(id=3, submitter=BOB)
    >>> submission_id = await submit_valid(ledger, ALICE)
"""

from __future__ import annotations

from typing import Any

from feedback_ledger.application.services.feedback_ledger_service import (
    FeedbackLedgerService,
)
from feedback_ledger.domain.models.submission import (
    FeedbackCategory,
    FeedbackLanguage,
    SubmissionCandidate,
    SubmissionRecord,
)

AUTHORITY = "ST1AUTHORITY0000000000000000000000"
ALICE = "ST2ALICE000000000000000000000000000"
BOB = "ST3BOB00000000000000000000000000000"

VALID_FEEDBACK = "The clinic queue moved quickly today."


def _candidate_fields(**overrides: Any) -> dict[str, Any]:
    fields: dict[str, Any] = {
        "service_id": 1,
        "feedback_text": VALID_FEEDBACK,
        "category": "service-quality",
        "priority": 3,
        "location": "Amman",
        "language": "english",
        "anonymity_level": 1,
    }
    fields.update(overrides)
    return fields


def make_candidate(**overrides: Any) -> SubmissionCandidate:
    """Build a valid SubmissionCandidate, with overrides."""
    return SubmissionCandidate(**_candidate_fields(**overrides))


def submission_payload(**overrides: Any) -> dict[str, Any]:
    """Build a valid JSON body for the submit endpoint, with overrides."""
    return _candidate_fields(**overrides)


def make_record(**overrides: Any) -> SubmissionRecord:
    """Build a stored SubmissionRecord, with overrides."""
    fields: dict[str, Any] = {
        "id": 1,
        "service_id": 1,
        "feedback_text": VALID_FEEDBACK,
        "submitter": ALICE,
        "created_at": 0,
        "category": FeedbackCategory.SERVICE_QUALITY,
        "priority": 3,
        "location": "Amman",
        "language": FeedbackLanguage.ENGLISH,
        "anonymity_level": 1,
    }
    fields.update(overrides)
    return SubmissionRecord(**fields)


async def submit_valid(
    ledger: FeedbackLedgerService,
    caller: str,
    **overrides: Any,
) -> int:
    """File a valid submission and return its id."""
    return await ledger.submit_feedback(caller, **_candidate_fields(**overrides))
