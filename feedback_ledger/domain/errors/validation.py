"""Submission validation errors.

One error per validation rule. The validation engine reports only the
first failing rule, so for a given candidate and configuration the raised
error is deterministic.
"""

from __future__ import annotations

from typing import Any

from feedback_ledger.domain.errors.codes import ErrorCategory, ErrorCode
from feedback_ledger.domain.errors.ledger import LedgerError


class SubmissionValidationError(LedgerError):
    """Base for field-level validation failures.

    Always recoverable: the caller resubmits corrected input.

    Attributes:
        field: Name of the offending field.
        value: The rejected value.
    """

    category = ErrorCategory.POLICY
    field: str = ""

    def __init__(self, value: Any, reason: str) -> None:
        self.value = value
        super().__init__(f"Invalid {self.field}: {reason}")


class InvalidServiceIdError(SubmissionValidationError):
    """Raised when service_id is not a positive integer."""

    code = ErrorCode.INVALID_SERVICE_ID
    field = "service_id"

    def __init__(self, value: int) -> None:
        super().__init__(value, f"must be positive, got {value}")


class InvalidFeedbackError(SubmissionValidationError):
    """Raised when feedback text length falls outside the configured bounds.

    Attributes:
        length: Length of the rejected text.
        min_length: Configured minimum at the time of the check.
        max_length: Configured maximum at the time of the check.
    """

    code = ErrorCode.INVALID_FEEDBACK
    field = "feedback_text"

    def __init__(self, length: int, min_length: int, max_length: int) -> None:
        self.length = length
        self.min_length = min_length
        self.max_length = max_length
        super().__init__(
            length,
            f"length {length} outside [{min_length}, {max_length}]",
        )


class InvalidCategoryError(SubmissionValidationError):
    """Raised when category is not one of the known feedback categories."""

    code = ErrorCode.INVALID_CATEGORY
    field = "category"

    def __init__(self, value: Any) -> None:
        super().__init__(value, f"unknown category {value!r}")


class InvalidPriorityError(SubmissionValidationError):
    """Raised when priority is outside 1-5."""

    code = ErrorCode.INVALID_PRIORITY
    field = "priority"

    def __init__(self, value: int) -> None:
        super().__init__(value, f"must be between 1 and 5, got {value}")


class InvalidLocationError(SubmissionValidationError):
    """Raised when location is empty or longer than 100 characters."""

    code = ErrorCode.INVALID_LOCATION
    field = "location"

    def __init__(self, value: str) -> None:
        super().__init__(value, f"length {len(value)} outside [1, 100]")


class InvalidLanguageError(SubmissionValidationError):
    """Raised when language is not one of the supported languages."""

    code = ErrorCode.INVALID_LANGUAGE
    field = "language"

    def __init__(self, value: Any) -> None:
        super().__init__(value, f"unsupported language {value!r}")


class InvalidAnonymityLevelError(SubmissionValidationError):
    """Raised when anonymity_level is outside 1-3."""

    code = ErrorCode.INVALID_ANONYMITY_LEVEL
    field = "anonymity_level"

    def __init__(self, value: int) -> None:
        super().__init__(value, f"must be between 1 and 3, got {value}")
