"""Feedback ledger service - the exposed surface of the ledger.

Composes the configuration store, the submission ledger and the lifecycle
controller behind one asyncio.Lock. Every public operation, reads
included, runs entirely inside that critical section, so operations are
serialized and each one either completes or leaves state untouched.
Each mutating operation first calls the clock's ``begin_operation``
hook, so a counting clock moves once per operation.

After each successful mutation exactly one LedgerEvent is emitted. A
rejected operation emits nothing, is logged at warning level with its
error kind, and is counted in the rejection metric before the error is
re-raised to the caller.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from feedback_ledger.application.ports.ledger_event_emitter import (
    LedgerEventEmitterPort,
)
from feedback_ledger.application.ports.ledger_metrics import LedgerMetricsProtocol
from feedback_ledger.application.ports.logical_clock import LogicalClockProtocol
from feedback_ledger.application.services.base import LoggingMixin
from feedback_ledger.application.services.configuration_service import (
    LedgerConfigurationService,
)
from feedback_ledger.application.services.rate_limit_service import (
    SubmissionRateLimitService,
)
from feedback_ledger.application.services.submission_ledger_service import (
    SubmissionLedgerService,
)
from feedback_ledger.application.services.submission_lifecycle_service import (
    SubmissionLifecycleService,
)
from feedback_ledger.domain.errors import LedgerError
from feedback_ledger.domain.events.ledger import (
    AUTHORITY_SET_EVENT_TYPE,
    MAX_FEEDBACK_LENGTH_UPDATED_EVENT_TYPE,
    MAX_SUBMISSIONS_UPDATED_EVENT_TYPE,
    MIN_FEEDBACK_LENGTH_UPDATED_EVENT_TYPE,
    RATE_LIMIT_UPDATED_EVENT_TYPE,
    SUBMISSION_CREATED_EVENT_TYPE,
    SUBMISSION_DEACTIVATED_EVENT_TYPE,
    SUBMISSION_FEE_UPDATED_EVENT_TYPE,
    SUBMISSION_UPDATED_EVENT_TYPE,
    SUBMISSION_VERIFIED_EVENT_TYPE,
    LedgerEvent,
)
from feedback_ledger.domain.models.amendment import AmendmentRecord
from feedback_ledger.domain.models.ledger_configuration import ConfigurationSnapshot
from feedback_ledger.domain.models.submission import (
    SubmissionCandidate,
    SubmissionRecord,
)


class FeedbackLedgerService(LoggingMixin):
    """Serialized facade over one ledger instance.

    Attributes:
        _configuration: Configuration store.
        _ledger: Create pipeline and reads.
        _lifecycle: Amend, verify, deactivate.
        _rate_limiter: Per-identity counters (read for remaining quota).
        _event_emitter: Outbound event sink.
        _clock: Logical clock for event timestamps.
        _metrics: Optional metrics collector.
        _lock: The single critical section.
    """

    def __init__(
        self,
        configuration: LedgerConfigurationService,
        ledger: SubmissionLedgerService,
        lifecycle: SubmissionLifecycleService,
        rate_limiter: SubmissionRateLimitService,
        event_emitter: LedgerEventEmitterPort,
        clock: LogicalClockProtocol,
        metrics: LedgerMetricsProtocol | None = None,
    ) -> None:
        self._configuration = configuration
        self._ledger = ledger
        self._lifecycle = lifecycle
        self._rate_limiter = rate_limiter
        self._event_emitter = event_emitter
        self._clock = clock
        self._metrics = metrics
        self._lock = asyncio.Lock()
        self._init_logger()

    # Configuration

    async def set_authority_contract(self, caller: str, identity: str | None) -> str:
        """Fix the authority identity (write-once).

        Raises:
            AuthorityAlreadySetError: An authority exists already.
            InvalidAuthorityError: The identity is empty or reserved.
        """
        async with self._lock:
            self._clock.begin_operation()
            try:
                authority = self._configuration.set_authority(caller, identity)
            except LedgerError as e:
                self._reject("set_authority_contract", caller, e)
                raise
            await self._emit(
                AUTHORITY_SET_EVENT_TYPE, None, caller, {"authority": authority}
            )
            return authority

    async def set_submission_fee(self, caller: str, fee: int) -> int:
        return await self._apply_setting(
            "set_submission_fee",
            caller,
            self._configuration.set_fee,
            fee,
            SUBMISSION_FEE_UPDATED_EVENT_TYPE,
        )

    async def set_rate_limit_per_user(self, caller: str, limit: int) -> int:
        return await self._apply_setting(
            "set_rate_limit_per_user",
            caller,
            self._configuration.set_rate_limit,
            limit,
            RATE_LIMIT_UPDATED_EVENT_TYPE,
        )

    async def set_min_feedback_length(self, caller: str, length: int) -> int:
        return await self._apply_setting(
            "set_min_feedback_length",
            caller,
            self._configuration.set_min_length,
            length,
            MIN_FEEDBACK_LENGTH_UPDATED_EVENT_TYPE,
        )

    async def set_max_feedback_length(self, caller: str, length: int) -> int:
        return await self._apply_setting(
            "set_max_feedback_length",
            caller,
            self._configuration.set_max_length,
            length,
            MAX_FEEDBACK_LENGTH_UPDATED_EVENT_TYPE,
        )

    async def set_max_submissions(self, caller: str, cap: int) -> int:
        return await self._apply_setting(
            "set_max_submissions",
            caller,
            self._configuration.set_submission_cap,
            cap,
            MAX_SUBMISSIONS_UPDATED_EVENT_TYPE,
        )

    async def get_configuration(self) -> ConfigurationSnapshot:
        async with self._lock:
            return self._configuration.snapshot()

    # Submissions

    async def submit_feedback(
        self,
        caller: str,
        service_id: int,
        feedback_text: str,
        category: str,
        priority: int,
        location: str,
        language: str,
        anonymity_level: int,
    ) -> int:
        """File a new submission.

        Args:
            caller: Authenticated submitter identity.
            service_id: Service the feedback is about.
            feedback_text: Feedback body.
            category: Category value (service-quality, access, efficiency).
            priority: Priority 1-5.
            location: Location, 1-100 characters.
            language: Language value (english, arabic, french).
            anonymity_level: Anonymity level 1-3.

        Returns:
            The new submission id.

        Raises:
            LedgerError: The first failing admission step.
        """
        candidate = SubmissionCandidate(
            service_id=service_id,
            feedback_text=feedback_text,
            category=category,
            priority=priority,
            location=location,
            language=language,
            anonymity_level=anonymity_level,
        )
        async with self._lock:
            self._clock.begin_operation()
            try:
                record = await self._ledger.submit(caller, candidate)
            except LedgerError as e:
                self._reject("submit_feedback", caller, e)
                raise

            fee = self._configuration.snapshot().fee
            if self._metrics is not None:
                self._metrics.record_submission_accepted(
                    fee=fee, stored=await self._ledger.count()
                )
            await self._emit(
                SUBMISSION_CREATED_EVENT_TYPE,
                record.id,
                caller,
                {"service_id": record.service_id, "fee": fee},
            )
            return record.id

    async def update_submission(
        self,
        caller: str,
        submission_id: int,
        feedback_text: str,
        category: str,
        priority: int,
    ) -> bool:
        """Amend feedback text, category and priority of own submission.

        Raises:
            SubmissionNotFoundError, NotAuthorizedError,
            SubmissionValidationError
        """
        async with self._lock:
            self._clock.begin_operation()
            try:
                _, amendment = await self._lifecycle.amend(
                    caller, submission_id, feedback_text, category, priority
                )
            except LedgerError as e:
                self._reject("update_submission", caller, e)
                raise
            self._record_transition("amend")
            await self._emit(
                SUBMISSION_UPDATED_EVENT_TYPE,
                submission_id,
                caller,
                {"amended_at": amendment.timestamp},
            )
            return True

    async def verify_submission(self, caller: str, submission_id: int) -> bool:
        """Mark a submission verified.

        Raises:
            SubmissionNotFoundError, AuthorityNotVerifiedError,
            AlreadyVerifiedError
        """
        async with self._lock:
            self._clock.begin_operation()
            try:
                await self._lifecycle.verify(caller, submission_id)
            except LedgerError as e:
                self._reject("verify_submission", caller, e)
                raise
            self._record_transition("verify")
            await self._emit(SUBMISSION_VERIFIED_EVENT_TYPE, submission_id, caller)
            return True

    async def deactivate_submission(self, caller: str, submission_id: int) -> bool:
        """Deactivate own submission (terminal).

        Raises:
            SubmissionNotFoundError, NotAuthorizedError, AlreadyInactiveError
        """
        async with self._lock:
            self._clock.begin_operation()
            try:
                await self._lifecycle.deactivate(caller, submission_id)
            except LedgerError as e:
                self._reject("deactivate_submission", caller, e)
                raise
            self._record_transition("deactivate")
            await self._emit(SUBMISSION_DEACTIVATED_EVENT_TYPE, submission_id, caller)
            return True

    # Reads (never fail)

    async def get_submission(self, submission_id: int) -> SubmissionRecord | None:
        async with self._lock:
            return await self._ledger.get(submission_id)

    async def get_submission_updates(
        self, submission_id: int
    ) -> AmendmentRecord | None:
        """Latest amendment of a submission, or None if never amended."""
        async with self._lock:
            return await self._ledger.get_amendment(submission_id)

    async def get_submissions_by_submitter(self, identity: str) -> list[int]:
        async with self._lock:
            return await self._ledger.get_by_submitter(identity)

    async def get_submission_count(self) -> int:
        """Number of accepted submissions."""
        async with self._lock:
            return await self._ledger.count()

    async def check_submission_existence(self, submission_id: int) -> bool:
        async with self._lock:
            return await self._ledger.exists(submission_id)

    async def get_remaining_submissions(self, identity: str) -> int:
        """Submissions the identity may still file under the rate limit."""
        async with self._lock:
            return self._rate_limiter.get_remaining(identity)

    async def get_submitter_summary(self, identity: str) -> tuple[list[int], int]:
        """Ids filed by an identity and its remaining quota, read together.

        Both values come from one critical section, so they always
        describe the same ledger state.
        """
        async with self._lock:
            submission_ids = await self._ledger.get_by_submitter(identity)
            return submission_ids, self._rate_limiter.get_remaining(identity)

    # Internals

    async def _apply_setting(
        self,
        operation: str,
        caller: str,
        setter: Callable[[str, int], int],
        value: int,
        event_type: str,
    ) -> int:
        async with self._lock:
            self._clock.begin_operation()
            try:
                applied = setter(caller, value)
            except LedgerError as e:
                self._reject(operation, caller, e)
                raise
            await self._emit(event_type, None, caller, {"value": applied})
            return applied

    def _reject(self, operation: str, caller: str, error: LedgerError) -> None:
        self._log_operation(operation, caller=caller).warning(
            "operation_rejected",
            error_kind=error.kind,
            error_code=int(error.code),
            detail=str(error),
        )
        if self._metrics is not None:
            self._metrics.record_rejection(operation, error.kind)

    def _record_transition(self, transition: str) -> None:
        if self._metrics is not None:
            self._metrics.record_transition(transition)

    async def _emit(
        self,
        event_type: str,
        submission_id: int | None,
        actor: str,
        details: dict[str, object] | None = None,
    ) -> None:
        # The state change is already applied; emitter trouble is only logged.
        log = self._log_operation(
            "emit", event_type=event_type, submission_id=submission_id
        )
        event = LedgerEvent(
            event_type=event_type,
            submission_id=submission_id,
            actor=actor,
            timestamp=self._clock.now(),
            details=dict(details or {}),
        )
        try:
            emitted = await self._event_emitter.emit(event)
        except Exception as e:
            log.warning("event_emission_failed", error=str(e))
            return
        if emitted:
            log.debug("event_emitted")
        else:
            log.warning("event_emission_failed")
