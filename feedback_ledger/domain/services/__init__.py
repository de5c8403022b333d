"""Stateless domain services."""

from feedback_ledger.domain.services.submission_validator import (
    ValidatedSubmission,
    validate_amendment,
    validate_submission,
)

__all__: list[str] = [
    "ValidatedSubmission",
    "validate_amendment",
    "validate_submission",
]
