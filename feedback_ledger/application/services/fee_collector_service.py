"""Fee collector service.

Moves the submission fee from the submitter to the authority through the
value-transfer port. Any failure of the port, whether a refusal or an
exception, is reported as TransferFailedError so Create aborts before
anything is written.
"""

from __future__ import annotations

from feedback_ledger.application.ports.value_transfer import ValueTransferPort
from feedback_ledger.application.services.base import LoggingMixin
from feedback_ledger.domain.errors import TransferFailedError


class FeeCollectorService(LoggingMixin):
    """Wraps the value-transfer primitive for fee collection."""

    def __init__(self, value_transfer: ValueTransferPort) -> None:
        self._value_transfer = value_transfer
        self._init_logger(component="ledger.fees")

    async def collect(self, amount: int, sender: str, recipient: str) -> None:
        """Transfer a fee.

        Args:
            amount: Fee to move.
            sender: Submitter paying the fee.
            recipient: Authority receiving the fee.

        Raises:
            TransferFailedError: The transfer was refused or errored.
        """
        log = self._log_operation(
            "collect", amount=amount, sender=sender, recipient=recipient
        )
        try:
            transferred = await self._value_transfer.transfer(
                amount=amount, sender=sender, recipient=recipient
            )
        except Exception as e:
            log.warning("fee_transfer_errored", error=str(e))
            raise TransferFailedError(
                amount=amount, sender=sender, recipient=recipient, reason=str(e)
            ) from e

        if not transferred:
            log.warning("fee_transfer_refused")
            raise TransferFailedError(amount=amount, sender=sender, recipient=recipient)

        log.debug("fee_collected")
