"""Submission record domain model.

A SubmissionRecord is one accepted piece of feedback. Records are frozen;
every lifecycle change produces a new record with a single field group
overridden and is re-inserted under the same id.

State machine:
    ACTIVE_UNVERIFIED -> ACTIVE_VERIFIED      (verify)
    ACTIVE_UNVERIFIED -> INACTIVE_UNVERIFIED  (deactivate)
    ACTIVE_VERIFIED   -> INACTIVE_VERIFIED    (deactivate)
    INACTIVE_UNVERIFIED -> INACTIVE_VERIFIED  (verify, intended)

    ``active`` only moves True -> False and ``verified`` only moves
    False -> True. Amendment rewrites content, never the flags, and is
    allowed in every state. Deactivating a record does not freeze it:
    inactive records can still be verified and amended.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from feedback_ledger.domain.errors.submission import (
    AlreadyInactiveError,
    AlreadyVerifiedError,
)
from feedback_ledger.domain.models.identity import Identity

MAX_LOCATION_LENGTH: int = 100
MIN_PRIORITY: int = 1
MAX_PRIORITY: int = 5
MIN_ANONYMITY_LEVEL: int = 1
MAX_ANONYMITY_LEVEL: int = 3


class FeedbackCategory(str, Enum):
    """What aspect of the referenced service the feedback concerns."""

    SERVICE_QUALITY = "service-quality"
    ACCESS = "access"
    EFFICIENCY = "efficiency"


class FeedbackLanguage(str, Enum):
    """Language the feedback is written in."""

    ENGLISH = "english"
    ARABIC = "arabic"
    FRENCH = "french"


class SubmissionState(Enum):
    """Derived lifecycle state of a persisted submission.

    A draft state is never persisted: candidates are validated before a
    record exists. Both inactive states are terminal for deactivation
    only; verify still moves INACTIVE_UNVERIFIED to INACTIVE_VERIFIED.
    """

    ACTIVE_UNVERIFIED = "ACTIVE_UNVERIFIED"
    ACTIVE_VERIFIED = "ACTIVE_VERIFIED"
    INACTIVE_UNVERIFIED = "INACTIVE_UNVERIFIED"
    INACTIVE_VERIFIED = "INACTIVE_VERIFIED"

    def is_terminal(self) -> bool:
        """Check whether the record can no longer be deactivated."""
        return self in TERMINAL_STATES

    @classmethod
    def from_flags(cls, active: bool, verified: bool) -> SubmissionState:
        """Map the two lifecycle flags onto a state."""
        if active:
            return cls.ACTIVE_VERIFIED if verified else cls.ACTIVE_UNVERIFIED
        return cls.INACTIVE_VERIFIED if verified else cls.INACTIVE_UNVERIFIED


TERMINAL_STATES: frozenset[SubmissionState] = frozenset(
    {
        SubmissionState.INACTIVE_UNVERIFIED,
        SubmissionState.INACTIVE_VERIFIED,
    }
)


@dataclass(frozen=True)
class SubmissionCandidate:
    """Raw submission input, before validation.

    Category and language stay plain strings here; the validation engine
    decides whether they name a known enumeration member.

    Attributes:
        service_id: Opaque reference to the service the feedback is about.
        feedback_text: The feedback body.
        category: Requested category value.
        priority: Requested priority (1-5).
        location: Free-text location, 1-100 characters.
        language: Requested language value.
        anonymity_level: Requested anonymity level (1-3).
    """

    service_id: int
    feedback_text: str
    category: str
    priority: int
    location: str
    language: str
    anonymity_level: int


@dataclass(frozen=True, eq=True)
class SubmissionRecord:
    """An accepted submission.

    Attributes:
        id: Sequential id, dense from 1, never reused.
        service_id: Opaque service reference (existence not checked).
        feedback_text: Current feedback body.
        submitter: Identity that filed the submission. Never changes.
        created_at: Logical clock value at insertion, moved forward only by
            an amendment (acts as "last modified").
        category: Current feedback category.
        priority: Current priority (1-5).
        location: Where the feedback originates.
        language: Language of the feedback.
        anonymity_level: Requested anonymity level (1-3).
        active: True until the submitter deactivates the record.
        verified: False until the record is verified.
    """

    id: int
    service_id: int
    feedback_text: str
    submitter: Identity
    created_at: int
    category: FeedbackCategory
    priority: int
    location: str
    language: FeedbackLanguage
    anonymity_level: int
    active: bool = field(default=True)
    verified: bool = field(default=False)

    @property
    def state(self) -> SubmissionState:
        """Return the lifecycle state derived from the flags."""
        return SubmissionState.from_flags(self.active, self.verified)

    def with_amendment(
        self,
        feedback_text: str,
        category: FeedbackCategory,
        priority: int,
        timestamp: int,
    ) -> SubmissionRecord:
        """Return a copy with amended content and a new timestamp.

        Flags, submitter and the remaining fields are preserved.
        """
        return replace(
            self,
            feedback_text=feedback_text,
            category=category,
            priority=priority,
            created_at=timestamp,
        )

    def with_verified(self) -> SubmissionRecord:
        """Return a verified copy of this record.

        Raises:
            AlreadyVerifiedError: If the record is already verified.
        """
        if self.verified:
            raise AlreadyVerifiedError(self.id)
        return replace(self, verified=True)

    def with_deactivated(self) -> SubmissionRecord:
        """Return an inactive copy of this record.

        Raises:
            AlreadyInactiveError: If the record is already inactive.
        """
        if not self.active:
            raise AlreadyInactiveError(self.id)
        return replace(self, active=False)

    def to_dict(self) -> dict[str, Any]:
        """Convert the record to a plain dict."""
        return {
            "id": self.id,
            "service_id": self.service_id,
            "feedback_text": self.feedback_text,
            "submitter": self.submitter,
            "created_at": self.created_at,
            "category": self.category.value,
            "priority": self.priority,
            "location": self.location,
            "language": self.language.value,
            "anonymity_level": self.anonymity_level,
            "active": self.active,
            "verified": self.verified,
        }
