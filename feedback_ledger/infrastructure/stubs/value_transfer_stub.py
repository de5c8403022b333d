"""Value transfer stub for development and testing.

Records every successful transfer so tests can assert exactly which fees
moved. Optionally tracks balances and refuses transfers the sender cannot
cover.

Usage in tests:
    transfer = ValueTransferStub()
    ...
    assert transfer.transfers == [TransferRecord(amount=10, sender="A", recipient="B")]

    transfer.should_fail = True     # next transfer is refused
"""

from __future__ import annotations

from dataclasses import dataclass

from feedback_ledger.application.ports.value_transfer import ValueTransferPort


@dataclass(frozen=True, eq=True)
class TransferRecord:
    """One completed value transfer."""

    amount: int
    sender: str
    recipient: str


class ValueTransferStub(ValueTransferPort):
    """In-memory value transfer primitive.

    Attributes:
        transfers: Completed transfers, in order.
        should_fail: If True, transfer() returns False.
        fail_exception: If set, transfer() raises it.
        balances: Per-identity balances, or None to skip balance checks.
    """

    def __init__(self, balances: dict[str, int] | None = None) -> None:
        self.transfers: list[TransferRecord] = []
        self.should_fail: bool = False
        self.fail_exception: Exception | None = None
        self.balances: dict[str, int] | None = (
            dict(balances) if balances is not None else None
        )

    async def transfer(self, amount: int, sender: str, recipient: str) -> bool:
        if self.fail_exception is not None:
            raise self.fail_exception
        if self.should_fail or amount < 0:
            return False

        if self.balances is not None:
            available = self.balances.get(sender, 0)
            if available < amount:
                return False
            self.balances[sender] = available - amount
            self.balances[recipient] = self.balances.get(recipient, 0) + amount

        self.transfers.append(
            TransferRecord(amount=amount, sender=sender, recipient=recipient)
        )
        return True

    def balance_of(self, identity: str) -> int:
        """Return an identity's balance (0 when balances are not tracked)."""
        if self.balances is None:
            return 0
        return self.balances.get(identity, 0)

    def reset(self) -> None:
        """Clear recorded transfers and failure switches."""
        self.transfers.clear()
        self.should_fail = False
        self.fail_exception = None
