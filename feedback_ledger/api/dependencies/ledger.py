"""Feedback Ledger API dependencies.

Dependency injection setup for the ledger. One ledger instance is wired
per process from LedgerPolicyConfig.from_environment(), using the
in-memory adapters.
"""

from fastapi import Header, HTTPException, Request

from feedback_ledger.application.services.feedback_ledger_service import (
    FeedbackLedgerService,
)
from feedback_ledger.bootstrap.ledger import LedgerComponents, build_ledger
from feedback_ledger.bootstrap.metrics import get_metrics_collector, reset_metrics
from feedback_ledger.config.ledger_config import LedgerPolicyConfig

CALLER_HEADER = "X-Caller-Identity"

_ledger_components: LedgerComponents | None = None
_ledger_policy: LedgerPolicyConfig | None = None


def get_ledger_policy() -> LedgerPolicyConfig:
    """Get ledger policy configuration.

    Returns singleton LedgerPolicyConfig loaded from environment.
    """
    global _ledger_policy
    if _ledger_policy is None:
        _ledger_policy = LedgerPolicyConfig.from_environment()
    return _ledger_policy


def get_ledger_components() -> LedgerComponents:
    """Get the wired ledger and its adapters (singleton)."""
    global _ledger_components
    if _ledger_components is None:
        _ledger_components = build_ledger(
            get_ledger_policy(),
            metrics=get_metrics_collector(),
        )
    return _ledger_components


def get_feedback_ledger_service() -> FeedbackLedgerService:
    """Get the feedback ledger service instance."""
    return get_ledger_components().service


def get_caller_identity(
    request: Request,
    x_caller_identity: str | None = Header(default=None, alias=CALLER_HEADER),
) -> str:
    """Resolve the authenticated caller identity.

    The identity is supplied by the fronting environment in the
    X-Caller-Identity header.

    Raises:
        HTTPException: 401 if the header is missing or blank.
    """
    if x_caller_identity is None or not x_caller_identity.strip():
        raise HTTPException(
            status_code=401,
            detail={
                "type": "urn:feedback-ledger:error:missing-caller-identity",
                "title": "Missing Caller Identity",
                "status": 401,
                "detail": f"{CALLER_HEADER} header is required",
                "instance": str(request.url),
            },
        )
    return x_caller_identity.strip()


# Testing helper functions


def set_ledger_components(components: LedgerComponents) -> None:
    """Use a pre-built ledger (testing)."""
    global _ledger_components
    _ledger_components = components


def set_ledger_policy(policy: LedgerPolicyConfig) -> None:
    """Set custom policy for testing; forces ledger recreation."""
    global _ledger_policy, _ledger_components
    _ledger_policy = policy
    _ledger_components = None


def reset_ledger_dependencies() -> None:
    """Reset all singleton instances for testing.

    Call this in test fixtures to ensure clean state between tests.
    """
    global _ledger_components
    global _ledger_policy

    _ledger_components = None
    _ledger_policy = None
    reset_metrics()
