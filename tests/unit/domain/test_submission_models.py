"""Unit tests for submission, amendment and configuration models."""

from dataclasses import FrozenInstanceError

import pytest

from feedback_ledger.domain.errors import AlreadyInactiveError, AlreadyVerifiedError
from feedback_ledger.domain.models import (
    BURN_IDENTITY,
    TERMINAL_STATES,
    AmendmentRecord,
    FeedbackCategory,
    LedgerConfiguration,
    SubmissionState,
    is_reserved_identity,
)
from tests.helpers import ALICE, make_record


class TestSubmissionState:
    """Tests for state derivation."""

    @pytest.mark.parametrize(
        ("active", "verified", "expected"),
        [
            (True, False, SubmissionState.ACTIVE_UNVERIFIED),
            (True, True, SubmissionState.ACTIVE_VERIFIED),
            (False, False, SubmissionState.INACTIVE_UNVERIFIED),
            (False, True, SubmissionState.INACTIVE_VERIFIED),
        ],
    )
    def test_from_flags(
        self, active: bool, verified: bool, expected: SubmissionState
    ) -> None:
        assert SubmissionState.from_flags(active, verified) == expected

    def test_inactive_states_are_terminal(self) -> None:
        assert TERMINAL_STATES == {
            SubmissionState.INACTIVE_UNVERIFIED,
            SubmissionState.INACTIVE_VERIFIED,
        }
        assert not SubmissionState.ACTIVE_VERIFIED.is_terminal()
        assert SubmissionState.INACTIVE_VERIFIED.is_terminal()


class TestSubmissionRecord:
    """Tests for SubmissionRecord copy-with-override helpers."""

    def test_new_record_is_active_unverified(self) -> None:
        record = make_record()

        assert record.active is True
        assert record.verified is False
        assert record.state == SubmissionState.ACTIVE_UNVERIFIED

    def test_record_is_frozen(self) -> None:
        record = make_record()

        with pytest.raises(FrozenInstanceError):
            record.verified = True  # type: ignore[misc]

    def test_with_amendment_preserves_other_fields(self) -> None:
        record = make_record(created_at=100, location="Irbid")

        amended = record.with_amendment(
            feedback_text="Much slower than last week.",
            category=FeedbackCategory.EFFICIENCY,
            priority=5,
            timestamp=130,
        )

        assert amended.feedback_text == "Much slower than last week."
        assert amended.category == FeedbackCategory.EFFICIENCY
        assert amended.priority == 5
        assert amended.created_at == 130
        assert amended.location == "Irbid"
        assert amended.submitter == record.submitter
        assert amended.active == record.active
        assert amended.verified == record.verified
        # original untouched
        assert record.created_at == 100

    def test_with_verified(self) -> None:
        verified = make_record().with_verified()

        assert verified.verified is True
        assert verified.state == SubmissionState.ACTIVE_VERIFIED

    def test_with_verified_twice_raises(self) -> None:
        verified = make_record().with_verified()

        with pytest.raises(AlreadyVerifiedError):
            verified.with_verified()

    def test_with_deactivated_keeps_verified_flag(self) -> None:
        record = make_record(verified=True).with_deactivated()

        assert record.active is False
        assert record.state == SubmissionState.INACTIVE_VERIFIED

    def test_with_deactivated_twice_raises(self) -> None:
        record = make_record().with_deactivated()

        with pytest.raises(AlreadyInactiveError):
            record.with_deactivated()

    def test_to_dict_uses_enum_values(self) -> None:
        data = make_record(id=4).to_dict()

        assert data["id"] == 4
        assert data["category"] == "service-quality"
        assert data["language"] == "english"
        assert data["submitter"] == ALICE


class TestAmendmentRecord:
    def test_to_dict(self) -> None:
        amendment = AmendmentRecord(
            submission_id=1,
            feedback_text="Updated feedback text.",
            category=FeedbackCategory.ACCESS,
            priority=2,
            timestamp=7,
            amended_by=ALICE,
        )

        assert amendment.to_dict() == {
            "submission_id": 1,
            "feedback_text": "Updated feedback text.",
            "category": "access",
            "priority": 2,
            "timestamp": 7,
            "amended_by": ALICE,
        }


class TestLedgerConfiguration:
    def test_reference_defaults(self) -> None:
        config = LedgerConfiguration()

        assert config.authority is None
        assert config.fee == 10
        assert config.rate_limit_per_identity == 5
        assert config.min_feedback_length == 10
        assert config.max_feedback_length == 1000
        assert config.submission_cap == 10_000

    def test_snapshot_is_a_detached_copy(self) -> None:
        config = LedgerConfiguration()
        snapshot = config.snapshot()

        config.fee = 99

        assert snapshot.fee == 10
        assert snapshot.has_authority is False
        with pytest.raises(FrozenInstanceError):
            snapshot.fee = 1  # type: ignore[misc]


class TestIdentity:
    @pytest.mark.parametrize("identity", [None, "", "   ", BURN_IDENTITY])
    def test_reserved(self, identity: str | None) -> None:
        assert is_reserved_identity(identity) is True

    def test_regular_identity(self) -> None:
        assert is_reserved_identity(ALICE) is False
