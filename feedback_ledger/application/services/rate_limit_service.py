"""Submission rate limit service (the Rate Limiter).

Tracks a lifetime submission count per identity and rejects Create once
the count reaches the configured limit. There is no window, decay or
reset: a count only ever goes up, and only after a submission has been
fully accepted.
"""

from __future__ import annotations

from feedback_ledger.application.services.base import LoggingMixin
from feedback_ledger.application.services.configuration_service import (
    LedgerConfigurationService,
)
from feedback_ledger.domain.errors import RateLimitExceededError


class SubmissionRateLimitService(LoggingMixin):
    """Lifetime per-identity submission counter.

    The limit is read from the configuration service on every check, so a
    lowered limit applies immediately to identities already above it.

    Attributes:
        _configuration: Source of ``rate_limit_per_identity``.
        _counts: identity -> accepted submissions so far.
    """

    def __init__(self, configuration: LedgerConfigurationService) -> None:
        self._configuration = configuration
        self._counts: dict[str, int] = {}
        self._init_logger(component="ledger.rate_limit")

    def check(self, identity: str) -> None:
        """Raise if the identity may not submit again.

        Raises:
            RateLimitExceededError: count(identity) >= limit.
        """
        limit = self._configuration.snapshot().rate_limit_per_identity
        current = self._counts.get(identity, 0)
        if current >= limit:
            self._log_operation("check", identity=identity).warning(
                "rate_limit_reached", current_count=current, limit=limit
            )
            raise RateLimitExceededError(
                submitter=identity, current_count=current, limit=limit
            )

    def record(self, identity: str) -> int:
        """Count one accepted submission for the identity.

        Returns:
            The new lifetime count.
        """
        new_count = self._counts.get(identity, 0) + 1
        self._counts[identity] = new_count
        return new_count

    def get_count(self, identity: str) -> int:
        return self._counts.get(identity, 0)

    def get_remaining(self, identity: str) -> int:
        """Submissions the identity has left under the current limit."""
        limit = self._configuration.snapshot().rate_limit_per_identity
        return max(0, limit - self._counts.get(identity, 0))
