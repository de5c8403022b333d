"""Logging setup for ledger entry points."""

from __future__ import annotations

import os

from feedback_ledger.infrastructure.observability import configure_structlog


def configure_logging(environment: str | None = None) -> str:
    """Configure structlog for the process.

    Args:
        environment: Overrides the ENVIRONMENT variable when given.

    Returns:
        The environment the renderer was chosen for.
    """
    selected = environment or os.environ.get("ENVIRONMENT", "development")
    configure_structlog(environment=selected)
    return selected


__all__ = ["configure_logging"]
