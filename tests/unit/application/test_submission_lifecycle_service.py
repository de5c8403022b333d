"""Unit tests for SubmissionLifecycleService.

Tests cover:
- amend(): submitter-only, validation, timestamp and amendment overwrite
- verify(): authority requirement and one-way flag
- deactivate(): submitter-only and terminal state
- Error precedence (not found first)
"""

import pytest

from feedback_ledger.application.services import (
    LedgerConfigurationService,
    SubmissionLifecycleService,
)
from feedback_ledger.domain.errors import (
    AlreadyInactiveError,
    AlreadyVerifiedError,
    AuthorityNotVerifiedError,
    InvalidCategoryError,
    InvalidFeedbackError,
    NotAuthorizedError,
    SubmissionNotFoundError,
)
from feedback_ledger.domain.models import FeedbackCategory, SubmissionState
from feedback_ledger.infrastructure.stubs import (
    LogicalClockStub,
    SubmissionRepositoryStub,
)
from tests.helpers import ALICE, AUTHORITY, BOB, make_record

NEW_TEXT = "Waiting time doubled since Monday."


@pytest.fixture
def configuration() -> LedgerConfigurationService:
    service = LedgerConfigurationService()
    service.set_authority(AUTHORITY, AUTHORITY)
    return service


@pytest.fixture
def lifecycle(
    repository: SubmissionRepositoryStub,
    configuration: LedgerConfigurationService,
    clock: LogicalClockStub,
) -> SubmissionLifecycleService:
    return SubmissionLifecycleService(
        repository=repository, configuration=configuration, clock=clock
    )


@pytest.fixture
def seeded(repository: SubmissionRepositoryStub) -> SubmissionRepositoryStub:
    repository.seed(make_record(id=1, submitter=ALICE, created_at=100))
    return repository


@pytest.mark.usefixtures("seeded")
class TestAmend:
    async def test_amend_rewrites_content(
        self,
        lifecycle: SubmissionLifecycleService,
        repository: SubmissionRepositoryStub,
        clock: LogicalClockStub,
    ) -> None:
        clock.set_time(140)

        record, amendment = await lifecycle.amend(ALICE, 1, NEW_TEXT, "access", 4)

        assert record.feedback_text == NEW_TEXT
        assert record.category == FeedbackCategory.ACCESS
        assert record.priority == 4
        assert record.created_at == 140
        assert record.location == "Amman"
        assert await repository.get(1) == record
        assert amendment.amended_by == ALICE
        assert amendment.timestamp == 140
        assert await repository.get_amendment(1) == amendment

    async def test_latest_amendment_wins(
        self,
        lifecycle: SubmissionLifecycleService,
        repository: SubmissionRepositoryStub,
        clock: LogicalClockStub,
    ) -> None:
        await lifecycle.amend(ALICE, 1, NEW_TEXT, "access", 4)
        clock.advance(3)
        await lifecycle.amend(ALICE, 1, "Second edit of the text.", "efficiency", 1)

        amendment = await repository.get_amendment(1)
        assert amendment is not None
        assert amendment.feedback_text == "Second edit of the text."
        assert amendment.timestamp == 103

    async def test_non_submitter_rejected(
        self,
        lifecycle: SubmissionLifecycleService,
        repository: SubmissionRepositoryStub,
    ) -> None:
        before = await repository.get(1)

        with pytest.raises(NotAuthorizedError) as exc_info:
            await lifecycle.amend(BOB, 1, NEW_TEXT, "access", 4)

        assert exc_info.value.submission_id == 1
        assert await repository.get(1) == before
        assert await repository.get_amendment(1) is None

    async def test_authorization_checked_before_validation(
        self, lifecycle: SubmissionLifecycleService
    ) -> None:
        with pytest.raises(NotAuthorizedError):
            await lifecycle.amend(BOB, 1, "short", "bogus", 9)

    async def test_invalid_content_rejected(
        self,
        lifecycle: SubmissionLifecycleService,
        repository: SubmissionRepositoryStub,
    ) -> None:
        with pytest.raises(InvalidFeedbackError):
            await lifecycle.amend(ALICE, 1, "short", "access", 4)
        with pytest.raises(InvalidCategoryError):
            await lifecycle.amend(ALICE, 1, NEW_TEXT, "speed", 4)

        assert await repository.get_amendment(1) is None

    async def test_inactive_record_can_be_amended(
        self,
        lifecycle: SubmissionLifecycleService,
    ) -> None:
        await lifecycle.deactivate(ALICE, 1)

        record, _ = await lifecycle.amend(ALICE, 1, NEW_TEXT, "access", 4)

        assert record.active is False
        assert record.feedback_text == NEW_TEXT

    async def test_unknown_submission(self, lifecycle: SubmissionLifecycleService) -> None:
        with pytest.raises(SubmissionNotFoundError):
            await lifecycle.amend(BOB, 99, "short", "bogus", 9)


@pytest.mark.usefixtures("seeded")
class TestVerify:
    async def test_verify_sets_flag(
        self,
        lifecycle: SubmissionLifecycleService,
        repository: SubmissionRepositoryStub,
    ) -> None:
        record = await lifecycle.verify(BOB, 1)

        assert record.verified is True
        assert record.state == SubmissionState.ACTIVE_VERIFIED
        assert await repository.get(1) == record

    async def test_verify_twice(self, lifecycle: SubmissionLifecycleService) -> None:
        await lifecycle.verify(AUTHORITY, 1)

        with pytest.raises(AlreadyVerifiedError):
            await lifecycle.verify(AUTHORITY, 1)

    async def test_verify_inactive_record(
        self, lifecycle: SubmissionLifecycleService
    ) -> None:
        await lifecycle.deactivate(ALICE, 1)

        record = await lifecycle.verify(AUTHORITY, 1)

        assert record.state == SubmissionState.INACTIVE_VERIFIED

    async def test_unknown_submission(self, lifecycle: SubmissionLifecycleService) -> None:
        with pytest.raises(SubmissionNotFoundError):
            await lifecycle.verify(AUTHORITY, 2)

    async def test_requires_authority(
        self,
        repository: SubmissionRepositoryStub,
        clock: LogicalClockStub,
    ) -> None:
        lifecycle = SubmissionLifecycleService(
            repository=repository,
            configuration=LedgerConfigurationService(),
            clock=clock,
        )

        with pytest.raises(AuthorityNotVerifiedError):
            await lifecycle.verify(ALICE, 1)

        with pytest.raises(SubmissionNotFoundError):
            await lifecycle.verify(ALICE, 2)


@pytest.mark.usefixtures("seeded")
class TestDeactivate:
    async def test_deactivate(
        self,
        lifecycle: SubmissionLifecycleService,
        repository: SubmissionRepositoryStub,
    ) -> None:
        record = await lifecycle.deactivate(ALICE, 1)

        assert record.active is False
        assert record.state == SubmissionState.INACTIVE_UNVERIFIED
        assert await repository.get(1) == record

    async def test_non_submitter_rejected(
        self,
        lifecycle: SubmissionLifecycleService,
        repository: SubmissionRepositoryStub,
    ) -> None:
        with pytest.raises(NotAuthorizedError):
            await lifecycle.deactivate(AUTHORITY, 1)

        record = await repository.get(1)
        assert record is not None
        assert record.active is True

    async def test_deactivate_twice(self, lifecycle: SubmissionLifecycleService) -> None:
        await lifecycle.deactivate(ALICE, 1)

        with pytest.raises(AlreadyInactiveError):
            await lifecycle.deactivate(ALICE, 1)

    async def test_authorization_checked_before_state(
        self, lifecycle: SubmissionLifecycleService
    ) -> None:
        await lifecycle.deactivate(ALICE, 1)

        with pytest.raises(NotAuthorizedError):
            await lifecycle.deactivate(BOB, 1)

    async def test_unknown_submission(self, lifecycle: SubmissionLifecycleService) -> None:
        with pytest.raises(SubmissionNotFoundError):
            await lifecycle.deactivate(ALICE, 5)
