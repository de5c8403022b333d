"""Configuration for the Feedback Ledger."""

from feedback_ledger.config.ledger_config import (
    DEFAULT_LEDGER_POLICY,
    TEST_LEDGER_POLICY,
    LedgerPolicyConfig,
)

__all__: list[str] = [
    "DEFAULT_LEDGER_POLICY",
    "TEST_LEDGER_POLICY",
    "LedgerPolicyConfig",
]
