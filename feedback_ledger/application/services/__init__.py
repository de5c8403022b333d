"""Application services for the Feedback Ledger."""

from feedback_ledger.application.services.configuration_service import (
    LedgerConfigurationService,
)
from feedback_ledger.application.services.fee_collector_service import (
    FeeCollectorService,
)
from feedback_ledger.application.services.feedback_ledger_service import (
    FeedbackLedgerService,
)
from feedback_ledger.application.services.rate_limit_service import (
    SubmissionRateLimitService,
)
from feedback_ledger.application.services.submission_ledger_service import (
    SubmissionLedgerService,
)
from feedback_ledger.application.services.submission_lifecycle_service import (
    SubmissionLifecycleService,
)

__all__: list[str] = [
    "FeeCollectorService",
    "FeedbackLedgerService",
    "LedgerConfigurationService",
    "SubmissionLedgerService",
    "SubmissionLifecycleService",
    "SubmissionRateLimitService",
]
