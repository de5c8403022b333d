"""Submission Repository Port - storage for records, amendments and indexes.

The repository is the exclusive owner of every SubmissionRecord and
AmendmentRecord. It also keeps the submissions-by-submitter index and the
sequential id counter.

All reads return values, never references into storage: a caller can't
mutate ledger state except through the write methods below.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from feedback_ledger.domain.models.amendment import AmendmentRecord
from feedback_ledger.domain.models.submission import SubmissionRecord


@runtime_checkable
class SubmissionRepositoryProtocol(Protocol):
    """Protocol for submission persistence."""

    async def next_id(self) -> int:
        """Return the id the next accepted submission will receive.

        Starts at 1. Only ``advance_id`` moves it.
        """
        ...

    async def advance_id(self) -> None:
        """Consume the current next id."""
        ...

    async def insert(self, record: SubmissionRecord) -> None:
        """Insert a new record and append it to the submitter index.

        Args:
            record: The new record.

        Raises:
            ValueError: If a record with the same id exists.
        """
        ...

    async def replace(self, record: SubmissionRecord) -> None:
        """Overwrite an existing record under the same id.

        Args:
            record: Updated copy of an existing record.

        Raises:
            KeyError: If no record with that id exists.
        """
        ...

    async def get(self, submission_id: int) -> SubmissionRecord | None:
        """Retrieve a record by id, or None if absent."""
        ...

    async def exists(self, submission_id: int) -> bool:
        """Check whether a record with the id exists."""
        ...

    async def count(self) -> int:
        """Return the number of stored records."""
        ...

    async def list_by_submitter(self, submitter: str) -> list[int]:
        """Return the submitter's ids in insertion order (empty if none)."""
        ...

    async def save_amendment(self, amendment: AmendmentRecord) -> None:
        """Store the amendment, replacing any previous one for that id."""
        ...

    async def get_amendment(self, submission_id: int) -> AmendmentRecord | None:
        """Retrieve the latest amendment for a submission, or None."""
        ...
