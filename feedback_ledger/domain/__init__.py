"""Domain layer for the Feedback Ledger.

Pure domain types with no infrastructure dependencies:
- errors: closed set of ledger errors with stable integer codes
- models: submission records, amendments and policy configuration
- events: ledger event records emitted by mutating operations
- services: stateless domain logic (submission validation)
"""

from feedback_ledger.domain.exceptions import FeedbackLedgerError

__all__: list[str] = ["FeedbackLedgerError"]
