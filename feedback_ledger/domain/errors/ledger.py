"""Base class for every error a ledger operation can fail with."""

from __future__ import annotations

from typing import Any, ClassVar

from feedback_ledger.domain.errors.codes import ErrorCategory, ErrorCode
from feedback_ledger.domain.exceptions import FeedbackLedgerError


class LedgerError(FeedbackLedgerError):
    """Raised when a ledger operation is rejected.

    Each public ledger operation either succeeds or raises exactly one
    LedgerError subclass. State is never modified when a LedgerError is
    raised: every check runs before the first write.

    Subclasses pin ``code`` and ``category`` as class attributes so the
    error kind can be inspected without an instance.

    Attributes:
        code: Stable integer code for this error kind.
        category: How the caller is expected to react.
    """

    code: ClassVar[ErrorCode]
    category: ClassVar[ErrorCategory]

    @property
    def kind(self) -> str:
        """Return the error kind name, e.g. ``RateLimitExceeded``."""
        name = type(self).__name__
        return name[: -len("Error")] if name.endswith("Error") else name

    def to_dict(self) -> dict[str, Any]:
        """Convert the error to a dict for problem responses and logs."""
        return {
            "code": int(self.code),
            "kind": self.kind,
            "category": self.category.value,
            "detail": str(self),
        }
