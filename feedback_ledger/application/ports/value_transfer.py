"""Value Transfer Port - native value movement between identities.

Used once per accepted submission to move the fee from the submitter to
the authority. The transfer is assumed to be atomic with the enclosing
ledger operation: if it fails, nothing else of that operation persists.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ValueTransferPort(Protocol):
    """Protocol for moving value between identities.

    Usage:
        ok = await transfer.transfer(amount=10, sender="alice", recipient="authority")
        if not ok:
            ...  # abort the enclosing operation
    """

    async def transfer(self, amount: int, sender: str, recipient: str) -> bool:
        """Move ``amount`` from ``sender`` to ``recipient``.

        Args:
            amount: Non-negative amount to move.
            sender: Paying identity.
            recipient: Receiving identity.

        Returns:
            True on success, False if the transfer was refused.

        Raises:
            Exception: Implementations may raise on infrastructure failure;
                callers treat it the same as a refusal.
        """
        ...
