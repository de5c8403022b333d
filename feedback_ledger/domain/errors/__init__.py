"""Ledger errors.

Every ledger operation fails with exactly one of these. Import from here
rather than from the individual modules.
"""

from feedback_ledger.domain.errors.codes import ErrorCategory, ErrorCode
from feedback_ledger.domain.errors.configuration import (
    AuthorityAlreadySetError,
    AuthorityNotSetError,
    InvalidAuthorityError,
    InvalidFeeParameterError,
    InvalidMaxLengthParameterError,
    InvalidMinLengthParameterError,
    InvalidParameterError,
    InvalidRateLimitParameterError,
    InvalidSubmissionCapParameterError,
)
from feedback_ledger.domain.errors.ledger import LedgerError
from feedback_ledger.domain.errors.submission import (
    AlreadyInactiveError,
    AlreadyVerifiedError,
    AuthorityNotVerifiedError,
    DuplicateSubmissionError,
    NotAuthorizedError,
    NotRegisteredError,
    RateLimitExceededError,
    SubmissionCapExceededError,
    SubmissionNotFoundError,
    TransferFailedError,
)
from feedback_ledger.domain.errors.validation import (
    InvalidAnonymityLevelError,
    InvalidCategoryError,
    InvalidFeedbackError,
    InvalidLanguageError,
    InvalidLocationError,
    InvalidPriorityError,
    InvalidServiceIdError,
    SubmissionValidationError,
)

__all__: list[str] = [
    "AlreadyInactiveError",
    "AlreadyVerifiedError",
    "AuthorityAlreadySetError",
    "AuthorityNotSetError",
    "AuthorityNotVerifiedError",
    "DuplicateSubmissionError",
    "ErrorCategory",
    "ErrorCode",
    "InvalidAnonymityLevelError",
    "InvalidAuthorityError",
    "InvalidCategoryError",
    "InvalidFeeParameterError",
    "InvalidFeedbackError",
    "InvalidLanguageError",
    "InvalidLocationError",
    "InvalidMaxLengthParameterError",
    "InvalidMinLengthParameterError",
    "InvalidParameterError",
    "InvalidPriorityError",
    "InvalidRateLimitParameterError",
    "InvalidServiceIdError",
    "InvalidSubmissionCapParameterError",
    "LedgerError",
    "NotAuthorizedError",
    "NotRegisteredError",
    "RateLimitExceededError",
    "SubmissionCapExceededError",
    "SubmissionNotFoundError",
    "SubmissionValidationError",
    "TransferFailedError",
]
