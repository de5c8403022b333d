"""API dependency providers."""

from feedback_ledger.api.dependencies.ledger import (
    CALLER_HEADER,
    get_caller_identity,
    get_feedback_ledger_service,
    get_ledger_components,
    reset_ledger_dependencies,
    set_ledger_components,
    set_ledger_policy,
)

__all__: list[str] = [
    "CALLER_HEADER",
    "get_caller_identity",
    "get_feedback_ledger_service",
    "get_ledger_components",
    "reset_ledger_dependencies",
    "set_ledger_components",
    "set_ledger_policy",
]
