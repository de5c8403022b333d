"""Ledger event records.

Every successful mutating operation emits exactly one LedgerEvent for
external indexers. Failed operations emit nothing.

Submission events carry the affected submission id; configuration events
carry ``submission_id=None``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

# Submission lifecycle event types
SUBMISSION_CREATED_EVENT_TYPE: str = "submission-created"
SUBMISSION_UPDATED_EVENT_TYPE: str = "submission-updated"
SUBMISSION_VERIFIED_EVENT_TYPE: str = "submission-verified"
SUBMISSION_DEACTIVATED_EVENT_TYPE: str = "submission-deactivated"

# Configuration event types
AUTHORITY_SET_EVENT_TYPE: str = "authority-set"
SUBMISSION_FEE_UPDATED_EVENT_TYPE: str = "submission-fee-updated"
RATE_LIMIT_UPDATED_EVENT_TYPE: str = "rate-limit-updated"
MIN_FEEDBACK_LENGTH_UPDATED_EVENT_TYPE: str = "min-feedback-length-updated"
MAX_FEEDBACK_LENGTH_UPDATED_EVENT_TYPE: str = "max-feedback-length-updated"
MAX_SUBMISSIONS_UPDATED_EVENT_TYPE: str = "max-submissions-updated"

SUBMISSION_EVENT_TYPES: frozenset[str] = frozenset(
    {
        SUBMISSION_CREATED_EVENT_TYPE,
        SUBMISSION_UPDATED_EVENT_TYPE,
        SUBMISSION_VERIFIED_EVENT_TYPE,
        SUBMISSION_DEACTIVATED_EVENT_TYPE,
    }
)


@dataclass(frozen=True, eq=True)
class LedgerEvent:
    """Observable record of one successful mutation.

    Attributes:
        event_type: One of the ``*_EVENT_TYPE`` constants.
        submission_id: Affected submission, None for configuration events.
        actor: Identity that performed the operation.
        timestamp: Logical clock value when the event was emitted.
        details: Extra indexing hints (new parameter value, etc.).
    """

    event_type: str
    submission_id: int | None
    actor: str
    timestamp: int
    details: dict[str, Any] = field(default_factory=dict, compare=False)

    def signable_content(self) -> bytes:
        """Return canonical bytes for external witnessing.

        JSON with sorted keys so the output is deterministic.
        """
        return json.dumps(self.to_dict(), sort_keys=True).encode("utf-8")

    def to_dict(self) -> dict[str, Any]:
        """Convert the event to a dict for indexers."""
        return {
            "event_type": self.event_type,
            "submission_id": self.submission_id,
            "actor": self.actor,
            "timestamp": self.timestamp,
            "details": dict(self.details),
        }
