"""Ledger configuration service (the Configuration Store).

Owns the ledger's LedgerConfiguration. The authority is write-once; the
other policy parameters can be changed any number of times once an
authority exists. Every setter validates before it mutates, so a
rejected call leaves the policy untouched.

By default the setters only require that an authority has been set. With
``require_authority_caller`` enabled they also require the caller to be
that authority.
"""

from __future__ import annotations

from feedback_ledger.application.services.base import LoggingMixin
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
from feedback_ledger.domain.models.identity import is_reserved_identity
from feedback_ledger.domain.models.ledger_configuration import (
    ConfigurationSnapshot,
    LedgerConfiguration,
)


class LedgerConfigurationService(LoggingMixin):
    """Configuration Store for a single ledger instance.

    Attributes:
        _configuration: The mutable policy object. Never handed out;
            readers get ``snapshot()`` copies.
    """

    def __init__(self, configuration: LedgerConfiguration | None = None) -> None:
        self._configuration = configuration or LedgerConfiguration()
        self._init_logger(component="ledger.configuration")

    def snapshot(self) -> ConfigurationSnapshot:
        """Return a frozen copy of the current policy."""
        return self._configuration.snapshot()

    @property
    def authority(self) -> str | None:
        return self._configuration.authority

    def set_authority(self, caller: str, identity: str | None) -> str:
        """Fix the authority identity. Succeeds at most once.

        Args:
            caller: Identity performing the call.
            identity: Identity that becomes the authority.

        Returns:
            The new authority.

        Raises:
            AuthorityAlreadySetError: An authority exists already.
            InvalidAuthorityError: The identity is empty or reserved.
        """
        log = self._log_operation("set_authority", caller=caller, identity=identity)

        current = self._configuration.authority
        if current is not None:
            raise AuthorityAlreadySetError(current)
        if identity is None or is_reserved_identity(identity):
            raise InvalidAuthorityError(identity)

        self._configuration.authority = identity
        log.info("authority_set")
        return identity

    def set_fee(self, caller: str, fee: int) -> int:
        """Set the per-submission fee (any non-negative integer).

        Raises:
            AuthorityNotSetError: No authority yet.
            NotAuthorizedError: Caller gating is on and caller isn't the authority.
            InvalidFeeParameterError: Fee is negative.
        """
        self._require_admin(caller, InvalidFeeParameterError.parameter)
        if fee < 0:
            raise InvalidFeeParameterError(fee, "must be non-negative")
        self._configuration.fee = fee
        self._log_operation("set_fee", caller=caller).info(
            "policy_updated", parameter="submission_fee", value=fee
        )
        return fee

    def set_rate_limit(self, caller: str, limit: int) -> int:
        """Set the lifetime submission limit per identity (must be > 0).

        Raises:
            AuthorityNotSetError: No authority yet.
            NotAuthorizedError: Caller gating is on and caller isn't the authority.
            InvalidRateLimitParameterError: Limit is not positive.
        """
        self._require_admin(caller, InvalidRateLimitParameterError.parameter)
        if limit <= 0:
            raise InvalidRateLimitParameterError(limit, "must be positive")
        self._configuration.rate_limit_per_identity = limit
        self._log_operation("set_rate_limit", caller=caller).info(
            "policy_updated", parameter="rate_limit_per_identity", value=limit
        )
        return limit

    def set_min_length(self, caller: str, length: int) -> int:
        """Set the minimum feedback length (must be > 0).

        Raises:
            AuthorityNotSetError: No authority yet.
            NotAuthorizedError: Caller gating is on and caller isn't the authority.
            InvalidMinLengthParameterError: Length is not positive.
        """
        self._require_admin(caller, InvalidMinLengthParameterError.parameter)
        if length <= 0:
            raise InvalidMinLengthParameterError(length, "must be positive")
        self._configuration.min_feedback_length = length
        self._log_operation("set_min_length", caller=caller).info(
            "policy_updated", parameter="min_feedback_length", value=length
        )
        return length

    def set_max_length(self, caller: str, length: int) -> int:
        """Set the maximum feedback length.

        Must be strictly greater than the current minimum length.

        Raises:
            AuthorityNotSetError: No authority yet.
            NotAuthorizedError: Caller gating is on and caller isn't the authority.
            InvalidMaxLengthParameterError: Length is not above the minimum.
        """
        self._require_admin(caller, InvalidMaxLengthParameterError.parameter)
        min_length = self._configuration.min_feedback_length
        if length <= min_length:
            raise InvalidMaxLengthParameterError(
                length, f"must be greater than min_feedback_length ({min_length})"
            )
        self._configuration.max_feedback_length = length
        self._log_operation("set_max_length", caller=caller).info(
            "policy_updated", parameter="max_feedback_length", value=length
        )
        return length

    def set_submission_cap(self, caller: str, cap: int) -> int:
        """Set the lifetime submission cap (must be > 0).

        Raises:
            AuthorityNotSetError: No authority yet.
            NotAuthorizedError: Caller gating is on and caller isn't the authority.
            InvalidSubmissionCapParameterError: Cap is not positive.
        """
        self._require_admin(caller, InvalidSubmissionCapParameterError.parameter)
        if cap <= 0:
            raise InvalidSubmissionCapParameterError(cap, "must be positive")
        self._configuration.submission_cap = cap
        self._log_operation("set_submission_cap", caller=caller).info(
            "policy_updated", parameter="submission_cap", value=cap
        )
        return cap

    def _require_admin(self, caller: str, parameter: str) -> None:
        authority = self._configuration.authority
        if authority is None:
            raise AuthorityNotSetError(parameter)
        if self._configuration.require_authority_caller and caller != authority:
            raise NotAuthorizedError(caller, f"set {parameter}")
