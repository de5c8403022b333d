"""Ledger policy configuration.

Initial values for the ledger's policy parameters, with environment
variable overrides for deployment tuning. The authority is never taken
from the environment: it is fixed at runtime through the authority
setter, exactly once.

Environment Variables:
- LEDGER_SUBMISSION_FEE: Fee per accepted submission (default: 10)
- LEDGER_RATE_LIMIT: Lifetime submissions per identity (default: 5)
- LEDGER_MIN_FEEDBACK_LENGTH: Minimum feedback length (default: 10)
- LEDGER_MAX_FEEDBACK_LENGTH: Maximum feedback length (default: 1000)
- LEDGER_MAX_SUBMISSIONS: Lifetime submission cap (default: 10000)
- LEDGER_REQUIRE_AUTHORITY_CALLER: Setters require caller == authority
  (default: false)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from feedback_ledger.domain.models.ledger_configuration import (
    DEFAULT_MAX_FEEDBACK_LENGTH,
    DEFAULT_MIN_FEEDBACK_LENGTH,
    DEFAULT_RATE_LIMIT_PER_IDENTITY,
    DEFAULT_SUBMISSION_CAP,
    DEFAULT_SUBMISSION_FEE,
    LedgerConfiguration,
)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Accepts 1/0, true/false, yes/no, on/off (case-insensitive).
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class LedgerPolicyConfig:
    """Initial policy values for a ledger instance.

    Attributes:
        submission_fee: Fee charged per accepted submission. Default: 10.
        rate_limit_per_identity: Lifetime submissions per identity. Default: 5.
        min_feedback_length: Inclusive minimum feedback length. Default: 10.
        max_feedback_length: Inclusive maximum feedback length. Default: 1000.
        max_submissions: Lifetime submission cap. Default: 10,000.
        require_authority_caller: If True, policy setters fail unless the
            caller is the authority. Default: False.
    """

    submission_fee: int = DEFAULT_SUBMISSION_FEE
    rate_limit_per_identity: int = DEFAULT_RATE_LIMIT_PER_IDENTITY
    min_feedback_length: int = DEFAULT_MIN_FEEDBACK_LENGTH
    max_feedback_length: int = DEFAULT_MAX_FEEDBACK_LENGTH
    max_submissions: int = DEFAULT_SUBMISSION_CAP
    require_authority_caller: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.submission_fee < 0:
            raise ValueError(
                f"submission_fee must be non-negative, got {self.submission_fee}"
            )
        if self.rate_limit_per_identity < 1:
            raise ValueError(
                "rate_limit_per_identity must be positive, "
                f"got {self.rate_limit_per_identity}"
            )
        if self.min_feedback_length < 1:
            raise ValueError(
                f"min_feedback_length must be positive, got {self.min_feedback_length}"
            )
        if self.max_feedback_length <= self.min_feedback_length:
            raise ValueError(
                f"max_feedback_length ({self.max_feedback_length}) must be greater "
                f"than min_feedback_length ({self.min_feedback_length})"
            )
        if self.max_submissions < 1:
            raise ValueError(
                f"max_submissions must be positive, got {self.max_submissions}"
            )

    @classmethod
    def from_environment(cls) -> LedgerPolicyConfig:
        """Create config from environment variables with defaults.

        Returns:
            LedgerPolicyConfig with values from environment or defaults.

        Raises:
            ValueError: If the combined values are inconsistent (for example
                a max length not above the min length).
        """
        return cls(
            submission_fee=_get_int_env(
                "LEDGER_SUBMISSION_FEE", DEFAULT_SUBMISSION_FEE
            ),
            rate_limit_per_identity=_get_int_env(
                "LEDGER_RATE_LIMIT", DEFAULT_RATE_LIMIT_PER_IDENTITY
            ),
            min_feedback_length=_get_int_env(
                "LEDGER_MIN_FEEDBACK_LENGTH", DEFAULT_MIN_FEEDBACK_LENGTH
            ),
            max_feedback_length=_get_int_env(
                "LEDGER_MAX_FEEDBACK_LENGTH", DEFAULT_MAX_FEEDBACK_LENGTH
            ),
            max_submissions=_get_int_env(
                "LEDGER_MAX_SUBMISSIONS", DEFAULT_SUBMISSION_CAP
            ),
            require_authority_caller=_get_bool_env(
                "LEDGER_REQUIRE_AUTHORITY_CALLER", False
            ),
        )

    def to_configuration(self) -> LedgerConfiguration:
        """Build a fresh, authority-less LedgerConfiguration."""
        return LedgerConfiguration(
            authority=None,
            fee=self.submission_fee,
            rate_limit_per_identity=self.rate_limit_per_identity,
            min_feedback_length=self.min_feedback_length,
            max_feedback_length=self.max_feedback_length,
            submission_cap=self.max_submissions,
            require_authority_caller=self.require_authority_caller,
        )


# Pre-defined configurations

# Reference policy
DEFAULT_LEDGER_POLICY = LedgerPolicyConfig()

# Small limits for unit tests
TEST_LEDGER_POLICY = LedgerPolicyConfig(
    submission_fee=10,
    rate_limit_per_identity=3,
    min_feedback_length=10,
    max_feedback_length=100,
    max_submissions=5,
)
