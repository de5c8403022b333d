"""Submission ledger service (Create and reads).

Admission pipeline for a new submission. Steps run in a fixed order and
the first failure wins; nothing is written until every fallible step has
passed:

1. Authority set              AuthorityNotVerifiedError
2. Caller registered          NotRegisteredError
3. Record count < cap         SubmissionCapExceededError
4. Rate limit                 RateLimitExceededError
5. Field validation           SubmissionValidationError subclasses
6. Id not already taken       DuplicateSubmissionError
7. Fee transfer               TransferFailedError

Then: insert record, update submitter index, count the submission against
the caller's rate limit, advance the id counter.
"""

from __future__ import annotations

from feedback_ledger.application.ports.identity_registry import (
    IdentityRegistryProtocol,
)
from feedback_ledger.application.ports.logical_clock import LogicalClockProtocol
from feedback_ledger.application.ports.submission_repository import (
    SubmissionRepositoryProtocol,
)
from feedback_ledger.application.services.base import LoggingMixin
from feedback_ledger.application.services.configuration_service import (
    LedgerConfigurationService,
)
from feedback_ledger.application.services.fee_collector_service import (
    FeeCollectorService,
)
from feedback_ledger.application.services.rate_limit_service import (
    SubmissionRateLimitService,
)
from feedback_ledger.domain.errors import (
    AuthorityNotVerifiedError,
    DuplicateSubmissionError,
    NotRegisteredError,
    SubmissionCapExceededError,
)
from feedback_ledger.domain.models.amendment import AmendmentRecord
from feedback_ledger.domain.models.submission import (
    SubmissionCandidate,
    SubmissionRecord,
)
from feedback_ledger.domain.services.submission_validator import validate_submission


class SubmissionLedgerService(LoggingMixin):
    """Creates submissions and answers read queries.

    Attributes:
        _repository: Record, amendment and index storage.
        _configuration: Policy source.
        _rate_limiter: Per-identity lifetime counter.
        _fee_collector: Fee transfer wrapper.
        _identity_registry: Registration oracle.
        _clock: Logical clock for ``created_at``.
    """

    def __init__(
        self,
        repository: SubmissionRepositoryProtocol,
        configuration: LedgerConfigurationService,
        rate_limiter: SubmissionRateLimitService,
        fee_collector: FeeCollectorService,
        identity_registry: IdentityRegistryProtocol,
        clock: LogicalClockProtocol,
    ) -> None:
        self._repository = repository
        self._configuration = configuration
        self._rate_limiter = rate_limiter
        self._fee_collector = fee_collector
        self._identity_registry = identity_registry
        self._clock = clock
        self._init_logger(component="ledger.submissions")

    async def submit(
        self,
        caller: str,
        candidate: SubmissionCandidate,
    ) -> SubmissionRecord:
        """Admit a new submission.

        Args:
            caller: Authenticated submitter identity.
            candidate: Raw submission fields.

        Returns:
            The stored SubmissionRecord.

        Raises:
            LedgerError: The subclass for the first failing admission step.
        """
        log = self._log_operation(
            "submit",
            caller=caller,
            service_id=candidate.service_id,
            text_length=len(candidate.feedback_text),
        )
        config = self._configuration.snapshot()

        if config.authority is None:
            raise AuthorityNotVerifiedError("submit_feedback")

        if not await self._identity_registry.is_registered(caller):
            raise NotRegisteredError(caller)

        stored = await self._repository.count()
        if stored >= config.submission_cap:
            raise SubmissionCapExceededError(
                current_count=stored, cap=config.submission_cap
            )

        self._rate_limiter.check(caller)

        validated = validate_submission(candidate, config)

        submission_id = await self._repository.next_id()
        if await self._repository.exists(submission_id):
            raise DuplicateSubmissionError(submission_id)

        await self._fee_collector.collect(
            amount=config.fee, sender=caller, recipient=config.authority
        )

        record = SubmissionRecord(
            id=submission_id,
            service_id=candidate.service_id,
            feedback_text=candidate.feedback_text,
            submitter=caller,
            created_at=self._clock.now(),
            category=validated.category,
            priority=candidate.priority,
            location=candidate.location,
            language=validated.language,
            anonymity_level=candidate.anonymity_level,
        )
        await self._repository.insert(record)
        self._rate_limiter.record(caller)
        await self._repository.advance_id()

        log.info("submission_accepted", submission_id=submission_id, fee=config.fee)
        return record

    async def get(self, submission_id: int) -> SubmissionRecord | None:
        return await self._repository.get(submission_id)

    async def get_amendment(self, submission_id: int) -> AmendmentRecord | None:
        return await self._repository.get_amendment(submission_id)

    async def exists(self, submission_id: int) -> bool:
        return await self._repository.exists(submission_id)

    async def count(self) -> int:
        """Number of accepted submissions."""
        return await self._repository.count()

    async def get_by_submitter(self, identity: str) -> list[int]:
        """Ids filed by an identity, oldest first (empty list when none)."""
        return await self._repository.list_by_submitter(identity)
