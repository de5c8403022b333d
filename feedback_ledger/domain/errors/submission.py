"""Submission admission and lifecycle errors.

Covers every failure of Create, Amend, Verify and Deactivate that is not
a field-level validation failure.
"""

from __future__ import annotations

from feedback_ledger.domain.errors.codes import ErrorCategory, ErrorCode
from feedback_ledger.domain.errors.ledger import LedgerError


class NotAuthorizedError(LedgerError):
    """Raised when the caller may not perform the operation.

    Amendment and deactivation are reserved to the original submitter.

    Attributes:
        caller: The identity that attempted the operation.
        operation: Name of the rejected operation.
        submission_id: The submission involved, if any.
    """

    code = ErrorCode.NOT_AUTHORIZED
    category = ErrorCategory.AUTHORIZATION

    def __init__(
        self,
        caller: str,
        operation: str,
        submission_id: int | None = None,
    ) -> None:
        self.caller = caller
        self.operation = operation
        self.submission_id = submission_id
        target = f" on submission {submission_id}" if submission_id is not None else ""
        super().__init__(f"{caller} is not authorized to {operation}{target}")


class NotRegisteredError(LedgerError):
    """Raised when the identity registry does not know the caller.

    Attributes:
        caller: The unregistered identity.
    """

    code = ErrorCode.NOT_REGISTERED
    category = ErrorCategory.AUTHORIZATION

    def __init__(self, caller: str) -> None:
        self.caller = caller
        super().__init__(f"Identity is not registered: {caller}")


class AuthorityNotVerifiedError(LedgerError):
    """Raised when an operation needs an authority and none is set.

    Create needs one to route the fee; Verify needs one as the verifying
    party.

    Attributes:
        operation: Name of the rejected operation.
    """

    code = ErrorCode.AUTHORITY_NOT_VERIFIED
    category = ErrorCategory.AUTHORIZATION

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation}: no authority has been set")


class SubmissionNotFoundError(LedgerError):
    """Raised when the referenced submission does not exist.

    Attributes:
        submission_id: The missing submission id.
    """

    code = ErrorCode.SUBMISSION_NOT_FOUND
    category = ErrorCategory.NOT_FOUND

    def __init__(self, submission_id: int) -> None:
        self.submission_id = submission_id
        super().__init__(f"Submission not found: {submission_id}")


class DuplicateSubmissionError(LedgerError):
    """Raised when the next id is already occupied.

    Ids are allocated sequentially under a single critical section, so this
    can only fire if that serialization is broken.

    Attributes:
        submission_id: The id that already exists.
    """

    code = ErrorCode.DUPLICATE_SUBMISSION
    category = ErrorCategory.STATE

    def __init__(self, submission_id: int) -> None:
        self.submission_id = submission_id
        super().__init__(f"Submission already exists: {submission_id}")


class AlreadyVerifiedError(LedgerError):
    """Raised when verifying a submission that is already verified."""

    code = ErrorCode.ALREADY_VERIFIED
    category = ErrorCategory.STATE

    def __init__(self, submission_id: int) -> None:
        self.submission_id = submission_id
        super().__init__(f"Submission {submission_id} is already verified")


class AlreadyInactiveError(LedgerError):
    """Raised when deactivating a submission that is already inactive."""

    code = ErrorCode.ALREADY_INACTIVE
    category = ErrorCategory.STATE

    def __init__(self, submission_id: int) -> None:
        self.submission_id = submission_id
        super().__init__(f"Submission {submission_id} is already inactive")


class SubmissionCapExceededError(LedgerError):
    """Raised when the ledger already holds the lifetime maximum of submissions.

    Attributes:
        current_count: Number of accepted submissions.
        cap: Configured lifetime cap.
    """

    code = ErrorCode.SUBMISSION_CAP_EXCEEDED
    category = ErrorCategory.CAPACITY

    def __init__(self, current_count: int, cap: int) -> None:
        self.current_count = current_count
        self.cap = cap
        super().__init__(f"Submission cap reached: {current_count}/{cap}")


class RateLimitExceededError(LedgerError):
    """Raised when an identity has used up its lifetime submission allowance.

    The limit is cumulative, not windowed: it only clears if the configured
    limit is raised.

    Attributes:
        submitter: The rate-limited identity.
        current_count: Submissions already accepted from this identity.
        limit: Configured per-identity limit.
    """

    code = ErrorCode.RATE_LIMIT_EXCEEDED
    category = ErrorCategory.CAPACITY

    def __init__(self, submitter: str, current_count: int, limit: int) -> None:
        self.submitter = submitter
        self.current_count = current_count
        self.limit = limit
        super().__init__(
            f"Rate limit exceeded for {submitter}: {current_count}/{limit} submissions"
        )


class TransferFailedError(LedgerError):
    """Raised when the submission fee could not be transferred.

    Create is aborted as a whole; nothing is persisted and the caller may
    retry.

    Attributes:
        amount: Fee amount that failed to move.
        sender: Paying identity.
        recipient: Authority that should have received the fee.
        reason: Description of the underlying failure.
    """

    code = ErrorCode.TRANSFER_FAILED
    category = ErrorCategory.TRANSFER

    def __init__(
        self,
        amount: int,
        sender: str,
        recipient: str,
        reason: str = "transfer rejected",
    ) -> None:
        self.amount = amount
        self.sender = sender
        self.recipient = recipient
        self.reason = reason
        super().__init__(
            f"Fee transfer of {amount} from {sender} to {recipient} failed: {reason}"
        )
