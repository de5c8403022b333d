"""Identity Registry Port - registration oracle for submitters.

The identity registry is an external collaborator. The ledger only asks
whether a caller is registered before accepting a submission; it never
registers identities itself.

In the reference deployment every identity counts as registered, so the
check is a placeholder that a real registry can replace without changing
the ledger.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IdentityRegistryProtocol(Protocol):
    """Protocol for checking submitter registration."""

    async def is_registered(self, identity: str) -> bool:
        """Check whether an identity may file submissions.

        Args:
            identity: The caller identity.

        Returns:
            True if the identity is registered.
        """
        ...
