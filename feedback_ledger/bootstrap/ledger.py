"""Bootstrap wiring for a ledger instance.

Builds a FeedbackLedgerService from a LedgerPolicyConfig. Any port left
unspecified is filled with its in-memory implementation, which is how
the development server and the tests run.
"""

from __future__ import annotations

from dataclasses import dataclass

from feedback_ledger.application.ports.identity_registry import (
    IdentityRegistryProtocol,
)
from feedback_ledger.application.ports.ledger_event_emitter import (
    LedgerEventEmitterPort,
)
from feedback_ledger.application.ports.logical_clock import LogicalClockProtocol
from feedback_ledger.application.ports.submission_repository import (
    SubmissionRepositoryProtocol,
)
from feedback_ledger.application.ports.value_transfer import ValueTransferPort
from feedback_ledger.application.services import (
    FeeCollectorService,
    FeedbackLedgerService,
    LedgerConfigurationService,
    SubmissionLedgerService,
    SubmissionLifecycleService,
    SubmissionRateLimitService,
)
from feedback_ledger.config.ledger_config import LedgerPolicyConfig
from feedback_ledger.infrastructure.adapters.sequence_clock import SequenceClock
from feedback_ledger.infrastructure.monitoring.ledger_metrics import (
    LedgerMetricsCollector,
)
from feedback_ledger.infrastructure.stubs import (
    IdentityRegistryStub,
    LedgerEventEmitterStub,
    SubmissionRepositoryStub,
    ValueTransferStub,
)


@dataclass(frozen=True)
class LedgerComponents:
    """A wired ledger plus the adapters it was built with.

    Exposed so callers (tests, the API dependency layer) can reach the
    adapters, e.g. to advance the clock or inspect transfers.
    """

    service: FeedbackLedgerService
    identity_registry: IdentityRegistryProtocol
    clock: LogicalClockProtocol
    value_transfer: ValueTransferPort
    repository: SubmissionRepositoryProtocol
    event_emitter: LedgerEventEmitterPort


def build_ledger(
    policy: LedgerPolicyConfig | None = None,
    *,
    identity_registry: IdentityRegistryProtocol | None = None,
    clock: LogicalClockProtocol | None = None,
    value_transfer: ValueTransferPort | None = None,
    repository: SubmissionRepositoryProtocol | None = None,
    event_emitter: LedgerEventEmitterPort | None = None,
    metrics: LedgerMetricsCollector | None = None,
) -> LedgerComponents:
    """Wire a complete ledger.

    Args:
        policy: Initial policy. Defaults to LedgerPolicyConfig().
        identity_registry: Registration oracle (default: allow everyone).
        clock: Logical clock (default: SequenceClock, one tick per
            mutating operation).
        value_transfer: Value transfer primitive (default: in-memory).
        repository: Submission storage (default: in-memory).
        event_emitter: Event sink (default: in-memory capture).
        metrics: Optional metrics collector.

    Returns:
        LedgerComponents with the service and its adapters.
    """
    policy = policy or LedgerPolicyConfig()
    identity_registry = identity_registry or IdentityRegistryStub()
    clock = clock or SequenceClock()
    value_transfer = value_transfer or ValueTransferStub()
    repository = repository or SubmissionRepositoryStub()
    event_emitter = event_emitter or LedgerEventEmitterStub()

    configuration = LedgerConfigurationService(policy.to_configuration())
    rate_limiter = SubmissionRateLimitService(configuration)
    ledger = SubmissionLedgerService(
        repository=repository,
        configuration=configuration,
        rate_limiter=rate_limiter,
        fee_collector=FeeCollectorService(value_transfer),
        identity_registry=identity_registry,
        clock=clock,
    )
    lifecycle = SubmissionLifecycleService(
        repository=repository,
        configuration=configuration,
        clock=clock,
    )
    service = FeedbackLedgerService(
        configuration=configuration,
        ledger=ledger,
        lifecycle=lifecycle,
        rate_limiter=rate_limiter,
        event_emitter=event_emitter,
        clock=clock,
        metrics=metrics,
    )
    return LedgerComponents(
        service=service,
        identity_registry=identity_registry,
        clock=clock,
        value_transfer=value_transfer,
        repository=repository,
        event_emitter=event_emitter,
    )
