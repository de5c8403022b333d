"""Configuration store errors.

Raised by the authority and policy setters. A rejected setter call never
mutates the configuration.
"""

from __future__ import annotations

from feedback_ledger.domain.errors.codes import ErrorCategory, ErrorCode
from feedback_ledger.domain.errors.ledger import LedgerError


class AuthorityAlreadySetError(LedgerError):
    """Raised when the write-once authority has already been fixed.

    Attributes:
        current_authority: The authority that is already in place.
    """

    code = ErrorCode.AUTHORITY_ALREADY_SET
    category = ErrorCategory.AUTHORIZATION

    def __init__(self, current_authority: str) -> None:
        self.current_authority = current_authority
        super().__init__(f"Authority is already set to {current_authority}")


class InvalidAuthorityError(LedgerError):
    """Raised when the proposed authority is empty or the reserved burn identity.

    Attributes:
        identity: The rejected identity.
    """

    code = ErrorCode.INVALID_AUTHORITY
    category = ErrorCategory.POLICY

    def __init__(self, identity: str | None) -> None:
        self.identity = identity
        super().__init__(f"Identity cannot act as authority: {identity!r}")


class AuthorityNotSetError(LedgerError):
    """Raised when a policy setter runs before any authority exists.

    Attributes:
        parameter: Name of the parameter the caller tried to change.
    """

    code = ErrorCode.AUTHORITY_NOT_SET
    category = ErrorCategory.AUTHORIZATION

    def __init__(self, parameter: str) -> None:
        self.parameter = parameter
        super().__init__(f"Cannot change {parameter}: no authority has been set")


class InvalidParameterError(LedgerError):
    """Base for out-of-range policy values.

    Attributes:
        parameter: Name of the policy parameter.
        value: The rejected value.
        requirement: Human-readable bound the value violated.
    """

    category = ErrorCategory.POLICY
    parameter: str = ""

    def __init__(self, value: int, requirement: str) -> None:
        self.value = value
        self.requirement = requirement
        super().__init__(f"Invalid {self.parameter}: {value} ({requirement})")


class InvalidFeeParameterError(InvalidParameterError):
    """Raised when the submission fee is negative."""

    code = ErrorCode.INVALID_FEE_PARAMETER
    parameter = "submission_fee"


class InvalidRateLimitParameterError(InvalidParameterError):
    """Raised when the per-identity rate limit is not positive."""

    code = ErrorCode.INVALID_RATE_LIMIT_PARAMETER
    parameter = "rate_limit_per_identity"


class InvalidMinLengthParameterError(InvalidParameterError):
    """Raised when the minimum feedback length is not positive."""

    code = ErrorCode.INVALID_MIN_LENGTH_PARAMETER
    parameter = "min_feedback_length"


class InvalidMaxLengthParameterError(InvalidParameterError):
    """Raised when the maximum feedback length does not exceed the minimum."""

    code = ErrorCode.INVALID_MAX_LENGTH_PARAMETER
    parameter = "max_feedback_length"


class InvalidSubmissionCapParameterError(InvalidParameterError):
    """Raised when the lifetime submission cap is not positive."""

    code = ErrorCode.INVALID_SUBMISSION_CAP_PARAMETER
    parameter = "submission_cap"
