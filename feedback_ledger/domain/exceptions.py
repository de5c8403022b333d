"""Root of the ledger's exception hierarchy."""


class FeedbackLedgerError(Exception):
    """Base for every error raised by the feedback ledger.

    Catch this to handle any ledger failure; the coded ledger errors in
    ``feedback_ledger.domain.errors`` all derive from it.
    """

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
