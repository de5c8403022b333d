"""Ledger policy configuration model.

LedgerConfiguration is the single mutable policy object of a ledger
instance. It is owned by the configuration service; everything else reads
it through ``snapshot()``, which returns a frozen copy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from feedback_ledger.domain.models.identity import Identity

DEFAULT_SUBMISSION_FEE: int = 10
DEFAULT_RATE_LIMIT_PER_IDENTITY: int = 5
DEFAULT_MIN_FEEDBACK_LENGTH: int = 10
DEFAULT_MAX_FEEDBACK_LENGTH: int = 1000
DEFAULT_SUBMISSION_CAP: int = 10_000


@dataclass(frozen=True)
class ConfigurationSnapshot:
    """Read-only copy of the policy at one point in time.

    Attributes:
        authority: Identity receiving fees, or None if not yet set.
        fee: Fee charged per accepted submission.
        rate_limit_per_identity: Lifetime submissions allowed per identity.
        min_feedback_length: Inclusive lower bound on feedback length.
        max_feedback_length: Inclusive upper bound on feedback length.
        submission_cap: Lifetime maximum number of submissions.
        require_authority_caller: Whether policy setters demand the caller
            be the authority.
    """

    authority: Identity | None
    fee: int
    rate_limit_per_identity: int
    min_feedback_length: int
    max_feedback_length: int
    submission_cap: int
    require_authority_caller: bool = False

    @property
    def has_authority(self) -> bool:
        return self.authority is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert the snapshot to a plain dict."""
        return {
            "authority": self.authority,
            "fee": self.fee,
            "rate_limit_per_identity": self.rate_limit_per_identity,
            "min_feedback_length": self.min_feedback_length,
            "max_feedback_length": self.max_feedback_length,
            "submission_cap": self.submission_cap,
            "require_authority_caller": self.require_authority_caller,
        }


@dataclass
class LedgerConfiguration:
    """Mutable policy state of a ledger instance.

    ``authority`` is write-once. The remaining parameters may change any
    number of times once an authority exists. Range checks live in the
    configuration service, which validates before it mutates.
    """

    authority: Identity | None = field(default=None)
    fee: int = field(default=DEFAULT_SUBMISSION_FEE)
    rate_limit_per_identity: int = field(default=DEFAULT_RATE_LIMIT_PER_IDENTITY)
    min_feedback_length: int = field(default=DEFAULT_MIN_FEEDBACK_LENGTH)
    max_feedback_length: int = field(default=DEFAULT_MAX_FEEDBACK_LENGTH)
    submission_cap: int = field(default=DEFAULT_SUBMISSION_CAP)
    require_authority_caller: bool = field(default=False)

    def snapshot(self) -> ConfigurationSnapshot:
        """Return a frozen copy of the current policy."""
        return ConfigurationSnapshot(
            authority=self.authority,
            fee=self.fee,
            rate_limit_per_identity=self.rate_limit_per_identity,
            min_feedback_length=self.min_feedback_length,
            max_feedback_length=self.max_feedback_length,
            submission_cap=self.submission_cap,
            require_authority_caller=self.require_authority_caller,
        )
