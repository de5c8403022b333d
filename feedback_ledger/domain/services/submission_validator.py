"""Submission validation engine.

Pure, stateless checks of a candidate submission against a configuration
snapshot and the fixed enumerations. Checks run in a fixed order and the
first failure wins, so the reported error is deterministic:

    1. service_id > 0                               InvalidServiceId
    2. min_length <= len(feedback_text) <= max      InvalidFeedback
    3. category is a FeedbackCategory value         InvalidCategory
    4. 1 <= priority <= 5                           InvalidPriority
    5. 0 < len(location) <= 100                     InvalidLocation
    6. language is a FeedbackLanguage value         InvalidLanguage
    7. 1 <= anonymity_level <= 3                    InvalidAnonymityLevel

Amendments re-run rules 2-4 only.
"""

from __future__ import annotations

from dataclasses import dataclass

from feedback_ledger.domain.errors.validation import (
    InvalidAnonymityLevelError,
    InvalidCategoryError,
    InvalidFeedbackError,
    InvalidLanguageError,
    InvalidLocationError,
    InvalidPriorityError,
    InvalidServiceIdError,
)
from feedback_ledger.domain.models.ledger_configuration import ConfigurationSnapshot
from feedback_ledger.domain.models.submission import (
    MAX_ANONYMITY_LEVEL,
    MAX_LOCATION_LENGTH,
    MAX_PRIORITY,
    MIN_ANONYMITY_LEVEL,
    MIN_PRIORITY,
    FeedbackCategory,
    FeedbackLanguage,
    SubmissionCandidate,
)


@dataclass(frozen=True)
class ValidatedSubmission:
    """A candidate that passed every rule, with enumerations resolved."""

    candidate: SubmissionCandidate
    category: FeedbackCategory
    language: FeedbackLanguage


def check_service_id(service_id: int) -> None:
    if service_id <= 0:
        raise InvalidServiceIdError(service_id)


def check_feedback_text(feedback_text: str, config: ConfigurationSnapshot) -> None:
    length = len(feedback_text)
    if not config.min_feedback_length <= length <= config.max_feedback_length:
        raise InvalidFeedbackError(
            length=length,
            min_length=config.min_feedback_length,
            max_length=config.max_feedback_length,
        )


def check_category(category: str) -> FeedbackCategory:
    try:
        return FeedbackCategory(category)
    except ValueError:
        raise InvalidCategoryError(category) from None


def check_priority(priority: int) -> None:
    if not MIN_PRIORITY <= priority <= MAX_PRIORITY:
        raise InvalidPriorityError(priority)


def check_location(location: str) -> None:
    if not 0 < len(location) <= MAX_LOCATION_LENGTH:
        raise InvalidLocationError(location)


def check_language(language: str) -> FeedbackLanguage:
    try:
        return FeedbackLanguage(language)
    except ValueError:
        raise InvalidLanguageError(language) from None


def check_anonymity_level(anonymity_level: int) -> None:
    if not MIN_ANONYMITY_LEVEL <= anonymity_level <= MAX_ANONYMITY_LEVEL:
        raise InvalidAnonymityLevelError(anonymity_level)


def validate_submission(
    candidate: SubmissionCandidate,
    config: ConfigurationSnapshot,
) -> ValidatedSubmission:
    """Run all seven rules against a candidate submission.

    Args:
        candidate: Raw submission input.
        config: Policy snapshot supplying the feedback length bounds.

    Returns:
        ValidatedSubmission with category and language resolved to enums.

    Raises:
        SubmissionValidationError: The subclass for the first failing rule.
    """
    check_service_id(candidate.service_id)
    check_feedback_text(candidate.feedback_text, config)
    category = check_category(candidate.category)
    check_priority(candidate.priority)
    check_location(candidate.location)
    language = check_language(candidate.language)
    check_anonymity_level(candidate.anonymity_level)
    return ValidatedSubmission(
        candidate=candidate,
        category=category,
        language=language,
    )


def validate_amendment(
    feedback_text: str,
    category: str,
    priority: int,
    config: ConfigurationSnapshot,
) -> FeedbackCategory:
    """Run rules 2-4 against amended content.

    Args:
        feedback_text: New feedback text.
        category: New category value.
        priority: New priority.
        config: Policy snapshot supplying the feedback length bounds.

    Returns:
        The resolved FeedbackCategory.

    Raises:
        SubmissionValidationError: The subclass for the first failing rule.
    """
    check_feedback_text(feedback_text, config)
    resolved = check_category(category)
    check_priority(priority)
    return resolved
