"""In-memory submission repository.

Stores records, the latest amendment per record, the submissions-by-
submitter index and the id counter in plain dicts. Used as the
development repository and in tests; it does not survive a restart.
"""

from __future__ import annotations

from feedback_ledger.application.ports.submission_repository import (
    SubmissionRepositoryProtocol,
)
from feedback_ledger.domain.models.amendment import AmendmentRecord
from feedback_ledger.domain.models.submission import SubmissionRecord


class SubmissionRepositoryStub(SubmissionRepositoryProtocol):
    """In-memory implementation of SubmissionRepositoryProtocol.

    Records are frozen dataclasses, so handing them out does not expose
    mutable state. Index lists are copied on read.

    Attributes:
        _records: submission id -> SubmissionRecord.
        _amendments: submission id -> latest AmendmentRecord.
        _by_submitter: submitter -> ids in insertion order.
        _next_id: id the next accepted submission receives.
    """

    def __init__(self) -> None:
        self._records: dict[int, SubmissionRecord] = {}
        self._amendments: dict[int, AmendmentRecord] = {}
        self._by_submitter: dict[str, list[int]] = {}
        self._next_id: int = 1

    async def next_id(self) -> int:
        return self._next_id

    async def advance_id(self) -> None:
        self._next_id += 1

    async def insert(self, record: SubmissionRecord) -> None:
        if record.id in self._records:
            raise ValueError(f"Submission already exists: {record.id}")
        self._records[record.id] = record
        self._by_submitter.setdefault(record.submitter, []).append(record.id)

    async def replace(self, record: SubmissionRecord) -> None:
        if record.id not in self._records:
            raise KeyError(f"Submission not found: {record.id}")
        self._records[record.id] = record

    async def get(self, submission_id: int) -> SubmissionRecord | None:
        return self._records.get(submission_id)

    async def exists(self, submission_id: int) -> bool:
        return submission_id in self._records

    async def count(self) -> int:
        return len(self._records)

    async def list_by_submitter(self, submitter: str) -> list[int]:
        return list(self._by_submitter.get(submitter, []))

    async def save_amendment(self, amendment: AmendmentRecord) -> None:
        self._amendments[amendment.submission_id] = amendment

    async def get_amendment(self, submission_id: int) -> AmendmentRecord | None:
        return self._amendments.get(submission_id)

    # Test helper methods

    def seed(self, record: SubmissionRecord) -> None:
        """Place a record directly, bypassing admission (test helper).

        Does not move the id counter, which lets tests provoke an id
        collision.
        """
        self._records[record.id] = record
        self._by_submitter.setdefault(record.submitter, []).append(record.id)

    def clear(self) -> None:
        """Remove all data and reset the id counter (test helper)."""
        self._records.clear()
        self._amendments.clear()
        self._by_submitter.clear()
        self._next_id = 1
