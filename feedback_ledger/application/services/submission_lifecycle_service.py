"""Submission lifecycle service (Amend, Verify, Deactivate).

State machine over the two record flags:

    ACTIVE_UNVERIFIED   --verify-->     ACTIVE_VERIFIED
    INACTIVE_UNVERIFIED --verify-->     INACTIVE_VERIFIED
    ACTIVE_*            --deactivate--> INACTIVE_*

INACTIVE_* is terminal for the ``active`` flag only. Verifying an
inactive record and amending an inactive record are both intended: an
authority can still confirm feedback its submitter has withdrawn, and the
submitter can still correct its content. Amendment rewrites content
without changing state. Records are frozen, so every transition writes
back a copy-with-override.
"""

from __future__ import annotations

from feedback_ledger.application.ports.logical_clock import LogicalClockProtocol
from feedback_ledger.application.ports.submission_repository import (
    SubmissionRepositoryProtocol,
)
from feedback_ledger.application.services.base import LoggingMixin
from feedback_ledger.application.services.configuration_service import (
    LedgerConfigurationService,
)
from feedback_ledger.domain.errors import (
    AuthorityNotVerifiedError,
    NotAuthorizedError,
    SubmissionNotFoundError,
)
from feedback_ledger.domain.models.amendment import AmendmentRecord
from feedback_ledger.domain.models.submission import SubmissionRecord
from feedback_ledger.domain.services.submission_validator import validate_amendment


class SubmissionLifecycleService(LoggingMixin):
    """Applies post-submission transitions."""

    def __init__(
        self,
        repository: SubmissionRepositoryProtocol,
        configuration: LedgerConfigurationService,
        clock: LogicalClockProtocol,
    ) -> None:
        self._repository = repository
        self._configuration = configuration
        self._clock = clock
        self._init_logger(component="ledger.lifecycle")

    async def amend(
        self,
        caller: str,
        submission_id: int,
        feedback_text: str,
        category: str,
        priority: int,
    ) -> tuple[SubmissionRecord, AmendmentRecord]:
        """Rewrite the content of a submission.

        Only the submitter may amend. Amendments are not rate-limited and
        are allowed on inactive records. The record's ``created_at`` moves
        to the current clock value and the amendment replaces any earlier
        one.

        Args:
            caller: Authenticated caller identity.
            submission_id: Submission to amend.
            feedback_text: New feedback text.
            category: New category value.
            priority: New priority.

        Returns:
            (updated record, stored amendment).

        Raises:
            SubmissionNotFoundError: No such submission.
            NotAuthorizedError: Caller is not the submitter.
            SubmissionValidationError: New content breaks rules 2-4.
        """
        log = self._log_operation("amend", caller=caller, submission_id=submission_id)
        record = await self._require_record(submission_id)

        if record.submitter != caller:
            raise NotAuthorizedError(caller, "amend", submission_id)

        resolved_category = validate_amendment(
            feedback_text, category, priority, self._configuration.snapshot()
        )

        timestamp = self._clock.now()
        updated = record.with_amendment(
            feedback_text=feedback_text,
            category=resolved_category,
            priority=priority,
            timestamp=timestamp,
        )
        amendment = AmendmentRecord(
            submission_id=submission_id,
            feedback_text=feedback_text,
            category=resolved_category,
            priority=priority,
            timestamp=timestamp,
            amended_by=caller,
        )
        await self._repository.replace(updated)
        await self._repository.save_amendment(amendment)

        log.info("submission_amended", timestamp=timestamp)
        return updated, amendment

    async def verify(self, caller: str, submission_id: int) -> SubmissionRecord:
        """Mark a submission verified.

        Requires an authority to exist; the caller is not otherwise
        restricted. Verification is allowed on inactive records.

        Raises:
            SubmissionNotFoundError: No such submission.
            AuthorityNotVerifiedError: No authority has been set.
            AlreadyVerifiedError: The record is verified already.
        """
        log = self._log_operation("verify", caller=caller, submission_id=submission_id)
        record = await self._require_record(submission_id)

        if self._configuration.authority is None:
            raise AuthorityNotVerifiedError("verify_submission")

        updated = record.with_verified()
        await self._repository.replace(updated)

        log.info("submission_verified")
        return updated

    async def deactivate(self, caller: str, submission_id: int) -> SubmissionRecord:
        """Retire a submission permanently.

        Raises:
            SubmissionNotFoundError: No such submission.
            NotAuthorizedError: Caller is not the submitter.
            AlreadyInactiveError: The record is inactive already.
        """
        log = self._log_operation(
            "deactivate", caller=caller, submission_id=submission_id
        )
        record = await self._require_record(submission_id)

        if record.submitter != caller:
            raise NotAuthorizedError(caller, "deactivate", submission_id)

        updated = record.with_deactivated()
        await self._repository.replace(updated)

        log.info("submission_deactivated", verified=updated.verified)
        return updated

    async def _require_record(self, submission_id: int) -> SubmissionRecord:
        record = await self._repository.get(submission_id)
        if record is None:
            raise SubmissionNotFoundError(submission_id)
        return record
