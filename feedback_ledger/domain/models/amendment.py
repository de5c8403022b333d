"""Amendment record domain model.

Only the latest amendment per submission is retained: a new amendment
overwrites the previous one under the same submission id.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from feedback_ledger.domain.models.identity import Identity
from feedback_ledger.domain.models.submission import FeedbackCategory


@dataclass(frozen=True, eq=True)
class AmendmentRecord:
    """The most recent amendment applied to a submission.

    Attributes:
        submission_id: The amended submission.
        feedback_text: Feedback text after the amendment.
        category: Category after the amendment.
        priority: Priority after the amendment.
        timestamp: Logical clock value when the amendment was applied.
        amended_by: Identity that applied it, always the original submitter.
    """

    submission_id: int
    feedback_text: str
    category: FeedbackCategory
    priority: int
    timestamp: int
    amended_by: Identity

    def to_dict(self) -> dict[str, Any]:
        """Convert the amendment to a plain dict."""
        return {
            "submission_id": self.submission_id,
            "feedback_text": self.feedback_text,
            "category": self.category.value,
            "priority": self.priority,
            "timestamp": self.timestamp,
            "amended_by": self.amended_by,
        }
