"""
Pytest configuration and shared fixtures for Feedback Ledger tests.

Testing Standards:
- Async tests run under pytest-asyncio (auto mode enabled in pyproject.toml)
- Ports are filled with the in-memory stubs from infrastructure.stubs
- Use AsyncMock only where a collaborator needs to misbehave
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

import pytest
from prometheus_client import CollectorRegistry

from feedback_ledger.application.services.feedback_ledger_service import (
    FeedbackLedgerService,
)
from feedback_ledger.bootstrap.ledger import LedgerComponents, build_ledger
from feedback_ledger.config.ledger_config import DEFAULT_LEDGER_POLICY
from feedback_ledger.infrastructure.monitoring.ledger_metrics import (
    LedgerMetricsCollector,
)
from feedback_ledger.infrastructure.stubs import (
    IdentityRegistryStub,
    LedgerEventEmitterStub,
    LogicalClockStub,
    SubmissionRepositoryStub,
    ValueTransferStub,
)
from tests.helpers import AUTHORITY


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from feedback_ledger import __version__

    return __version__


@pytest.fixture
def identity_registry() -> IdentityRegistryStub:
    return IdentityRegistryStub()


@pytest.fixture
def clock() -> LogicalClockStub:
    """Logical clock starting at 100 so timestamps are non-trivial."""
    return LogicalClockStub(start=100)


@pytest.fixture
def value_transfer() -> ValueTransferStub:
    return ValueTransferStub()


@pytest.fixture
def repository() -> SubmissionRepositoryStub:
    return SubmissionRepositoryStub()


@pytest.fixture
def event_emitter() -> LedgerEventEmitterStub:
    return LedgerEventEmitterStub()


@pytest.fixture
def metrics() -> LedgerMetricsCollector:
    """Metrics collector with an isolated registry."""
    return LedgerMetricsCollector(registry=CollectorRegistry())


@pytest.fixture
def ledger_components(
    identity_registry: IdentityRegistryStub,
    clock: LogicalClockStub,
    value_transfer: ValueTransferStub,
    repository: SubmissionRepositoryStub,
    event_emitter: LedgerEventEmitterStub,
    metrics: LedgerMetricsCollector,
) -> LedgerComponents:
    """A ledger with the reference policy and no authority yet."""
    return build_ledger(
        DEFAULT_LEDGER_POLICY,
        identity_registry=identity_registry,
        clock=clock,
        value_transfer=value_transfer,
        repository=repository,
        event_emitter=event_emitter,
        metrics=metrics,
    )


@pytest.fixture
def ledger(ledger_components: LedgerComponents) -> FeedbackLedgerService:
    """Ledger service with no authority set."""
    return ledger_components.service


@pytest.fixture
async def ready_ledger(
    ledger: FeedbackLedgerService,
    event_emitter: LedgerEventEmitterStub,
) -> FeedbackLedgerService:
    """Ledger service with AUTHORITY set and the setup event discarded."""
    await ledger.set_authority_contract(AUTHORITY, AUTHORITY)
    event_emitter.reset()
    return ledger
