"""Unit tests for the submission validation engine.

Tests cover:
- Each rule's accept/reject boundaries
- First-failure ordering when several fields are invalid
- Amendment validation (rules 2-4 only)
"""

import pytest

from feedback_ledger.domain.errors import (
    InvalidAnonymityLevelError,
    InvalidCategoryError,
    InvalidFeedbackError,
    InvalidLanguageError,
    InvalidLocationError,
    InvalidPriorityError,
    InvalidServiceIdError,
)
from feedback_ledger.domain.models import (
    FeedbackCategory,
    FeedbackLanguage,
    LedgerConfiguration,
)
from feedback_ledger.domain.models.ledger_configuration import ConfigurationSnapshot
from feedback_ledger.domain.services import validate_amendment, validate_submission
from tests.helpers import make_candidate


@pytest.fixture
def config() -> ConfigurationSnapshot:
    """Reference policy snapshot (min 10, max 1000)."""
    return LedgerConfiguration().snapshot()


class TestValidateSubmission:
    """Tests for validate_submission()."""

    def test_valid_candidate_resolves_enums(self, config: ConfigurationSnapshot) -> None:
        result = validate_submission(
            make_candidate(category="access", language="arabic"), config
        )

        assert result.category == FeedbackCategory.ACCESS
        assert result.language == FeedbackLanguage.ARABIC

    @pytest.mark.parametrize("service_id", [0, -1])
    def test_service_id_must_be_positive(
        self, config: ConfigurationSnapshot, service_id: int
    ) -> None:
        with pytest.raises(InvalidServiceIdError):
            validate_submission(make_candidate(service_id=service_id), config)

    @pytest.mark.parametrize("length", [10, 11, 999, 1000])
    def test_feedback_length_accepted_inside_bounds(
        self, config: ConfigurationSnapshot, length: int
    ) -> None:
        validate_submission(make_candidate(feedback_text="x" * length), config)

    @pytest.mark.parametrize("length", [0, 9, 1001])
    def test_feedback_length_rejected_outside_bounds(
        self, config: ConfigurationSnapshot, length: int
    ) -> None:
        with pytest.raises(InvalidFeedbackError) as exc_info:
            validate_submission(make_candidate(feedback_text="x" * length), config)

        assert exc_info.value.length == length

    def test_feedback_bounds_follow_configuration(self) -> None:
        config = LedgerConfiguration(min_feedback_length=3, max_feedback_length=5)

        validate_submission(make_candidate(feedback_text="abc"), config.snapshot())
        with pytest.raises(InvalidFeedbackError):
            validate_submission(make_candidate(feedback_text="abcdef"), config.snapshot())

    @pytest.mark.parametrize("category", ["", "Access", "service_quality", "speed"])
    def test_unknown_category(self, config: ConfigurationSnapshot, category: str) -> None:
        with pytest.raises(InvalidCategoryError):
            validate_submission(make_candidate(category=category), config)

    @pytest.mark.parametrize("category", ["service-quality", "access", "efficiency"])
    def test_known_categories(self, config: ConfigurationSnapshot, category: str) -> None:
        validate_submission(make_candidate(category=category), config)

    @pytest.mark.parametrize("priority", [0, 6, -3])
    def test_priority_out_of_range(
        self, config: ConfigurationSnapshot, priority: int
    ) -> None:
        with pytest.raises(InvalidPriorityError):
            validate_submission(make_candidate(priority=priority), config)

    @pytest.mark.parametrize("priority", [1, 5])
    def test_priority_bounds(self, config: ConfigurationSnapshot, priority: int) -> None:
        validate_submission(make_candidate(priority=priority), config)

    @pytest.mark.parametrize("location", ["", "L" * 101])
    def test_location_length(self, config: ConfigurationSnapshot, location: str) -> None:
        with pytest.raises(InvalidLocationError):
            validate_submission(make_candidate(location=location), config)

    def test_location_at_limit(self, config: ConfigurationSnapshot) -> None:
        validate_submission(make_candidate(location="L" * 100), config)

    @pytest.mark.parametrize("language", ["", "English", "german"])
    def test_unsupported_language(
        self, config: ConfigurationSnapshot, language: str
    ) -> None:
        with pytest.raises(InvalidLanguageError):
            validate_submission(make_candidate(language=language), config)

    @pytest.mark.parametrize("level", [0, 4])
    def test_anonymity_level_out_of_range(
        self, config: ConfigurationSnapshot, level: int
    ) -> None:
        with pytest.raises(InvalidAnonymityLevelError):
            validate_submission(make_candidate(anonymity_level=level), config)


class TestValidationOrder:
    """The first failing rule decides the error."""

    def test_service_id_checked_before_everything(
        self, config: ConfigurationSnapshot
    ) -> None:
        candidate = make_candidate(
            service_id=0,
            feedback_text="short",
            category="bogus",
            priority=9,
            location="",
            language="klingon",
            anonymity_level=7,
        )

        with pytest.raises(InvalidServiceIdError):
            validate_submission(candidate, config)

    def test_feedback_before_category(self, config: ConfigurationSnapshot) -> None:
        with pytest.raises(InvalidFeedbackError):
            validate_submission(
                make_candidate(feedback_text="short", category="bogus"), config
            )

    def test_priority_before_location(self, config: ConfigurationSnapshot) -> None:
        with pytest.raises(InvalidPriorityError):
            validate_submission(make_candidate(priority=0, location=""), config)

    def test_language_before_anonymity(self, config: ConfigurationSnapshot) -> None:
        with pytest.raises(InvalidLanguageError):
            validate_submission(
                make_candidate(language="german", anonymity_level=0), config
            )


class TestValidateAmendment:
    """Tests for validate_amendment()."""

    def test_returns_resolved_category(self, config: ConfigurationSnapshot) -> None:
        assert (
            validate_amendment("Updated feedback.", "efficiency", 2, config)
            == FeedbackCategory.EFFICIENCY
        )

    def test_rule_order(self, config: ConfigurationSnapshot) -> None:
        with pytest.raises(InvalidFeedbackError):
            validate_amendment("short", "bogus", 9, config)
        with pytest.raises(InvalidCategoryError):
            validate_amendment("Long enough text.", "bogus", 9, config)
        with pytest.raises(InvalidPriorityError):
            validate_amendment("Long enough text.", "access", 9, config)
