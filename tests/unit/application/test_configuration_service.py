"""Unit tests for LedgerConfigurationService.

Tests cover:
- Write-once authority and reserved identities
- Setter gating on authority presence
- Optional caller-equals-authority gating
- Range checks per parameter, with no mutation on failure
"""

import pytest

from feedback_ledger.application.services.configuration_service import (
    LedgerConfigurationService,
)
from feedback_ledger.domain.errors import (
    AuthorityAlreadySetError,
    AuthorityNotSetError,
    InvalidAuthorityError,
    InvalidFeeParameterError,
    InvalidMaxLengthParameterError,
    InvalidMinLengthParameterError,
    InvalidRateLimitParameterError,
    InvalidSubmissionCapParameterError,
    NotAuthorizedError,
)
from feedback_ledger.domain.models import BURN_IDENTITY, LedgerConfiguration
from tests.helpers import ALICE, AUTHORITY, BOB


@pytest.fixture
def service() -> LedgerConfigurationService:
    return LedgerConfigurationService()


@pytest.fixture
def configured(service: LedgerConfigurationService) -> LedgerConfigurationService:
    service.set_authority(AUTHORITY, AUTHORITY)
    return service


class TestSetAuthority:
    def test_sets_authority_once(self, service: LedgerConfigurationService) -> None:
        assert service.set_authority(ALICE, AUTHORITY) == AUTHORITY
        assert service.authority == AUTHORITY
        assert service.snapshot().has_authority

    def test_second_call_rejected(self, configured: LedgerConfigurationService) -> None:
        with pytest.raises(AuthorityAlreadySetError) as exc_info:
            configured.set_authority(BOB, BOB)

        assert exc_info.value.current_authority == AUTHORITY
        assert configured.authority == AUTHORITY

    @pytest.mark.parametrize("identity", [None, "", BURN_IDENTITY])
    def test_reserved_identity_rejected(
        self, service: LedgerConfigurationService, identity: str | None
    ) -> None:
        with pytest.raises(InvalidAuthorityError):
            service.set_authority(ALICE, identity)

        assert service.authority is None


class TestSettersRequireAuthority:
    @pytest.mark.parametrize(
        "setter",
        ["set_fee", "set_rate_limit", "set_min_length", "set_max_length", "set_submission_cap"],
    )
    def test_rejected_without_authority(
        self, service: LedgerConfigurationService, setter: str
    ) -> None:
        before = service.snapshot()

        with pytest.raises(AuthorityNotSetError):
            getattr(service, setter)(ALICE, 50)

        assert service.snapshot() == before

    def test_any_caller_allowed_by_default(
        self, configured: LedgerConfigurationService
    ) -> None:
        assert configured.set_fee(BOB, 20) == 20
        assert configured.snapshot().fee == 20


class TestAuthorityCallerGating:
    @pytest.fixture
    def gated(self) -> LedgerConfigurationService:
        service = LedgerConfigurationService(
            LedgerConfiguration(require_authority_caller=True)
        )
        service.set_authority(AUTHORITY, AUTHORITY)
        return service

    def test_non_authority_rejected(self, gated: LedgerConfigurationService) -> None:
        with pytest.raises(NotAuthorizedError):
            gated.set_rate_limit(ALICE, 10)

        assert gated.snapshot().rate_limit_per_identity == 5

    def test_authority_allowed(self, gated: LedgerConfigurationService) -> None:
        assert gated.set_rate_limit(AUTHORITY, 10) == 10

    def test_missing_authority_reported_first(self) -> None:
        service = LedgerConfigurationService(
            LedgerConfiguration(require_authority_caller=True)
        )

        with pytest.raises(AuthorityNotSetError):
            service.set_fee(ALICE, 1)


class TestParameterRanges:
    def test_fee_zero_allowed(self, configured: LedgerConfigurationService) -> None:
        assert configured.set_fee(AUTHORITY, 0) == 0

    def test_fee_large_allowed(self, configured: LedgerConfigurationService) -> None:
        assert configured.set_fee(AUTHORITY, 10**12) == 10**12

    def test_negative_fee_rejected(self, configured: LedgerConfigurationService) -> None:
        with pytest.raises(InvalidFeeParameterError):
            configured.set_fee(AUTHORITY, -1)

        assert configured.snapshot().fee == 10

    @pytest.mark.parametrize(
        ("setter", "error_class", "field"),
        [
            ("set_rate_limit", InvalidRateLimitParameterError, "rate_limit_per_identity"),
            ("set_min_length", InvalidMinLengthParameterError, "min_feedback_length"),
            (
                "set_submission_cap",
                InvalidSubmissionCapParameterError,
                "submission_cap",
            ),
        ],
    )
    @pytest.mark.parametrize("value", [0, -5])
    def test_non_positive_rejected(
        self,
        configured: LedgerConfigurationService,
        setter: str,
        error_class: type[Exception],
        field: str,
        value: int,
    ) -> None:
        before = getattr(configured.snapshot(), field)

        with pytest.raises(error_class):
            getattr(configured, setter)(AUTHORITY, value)

        assert getattr(configured.snapshot(), field) == before

    def test_max_length_must_exceed_current_min(
        self, configured: LedgerConfigurationService
    ) -> None:
        configured.set_min_length(AUTHORITY, 50)

        with pytest.raises(InvalidMaxLengthParameterError):
            configured.set_max_length(AUTHORITY, 50)

        assert configured.set_max_length(AUTHORITY, 51) == 51

    def test_min_length_not_checked_against_max(
        self, configured: LedgerConfigurationService
    ) -> None:
        # Only the max setter compares the two bounds.
        assert configured.set_min_length(AUTHORITY, 2000) == 2000
        assert configured.snapshot().max_feedback_length == 1000
