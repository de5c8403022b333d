"""Stable error codes and categories for ledger errors.

Every ledger error carries exactly one ErrorCode. The integer values are
part of the external contract: clients and indexers key on them, so a code
is never renumbered or reused.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class ErrorCode(IntEnum):
    """Integer code for each ledger error kind."""

    NOT_AUTHORIZED = 100
    NOT_REGISTERED = 101
    INVALID_SERVICE_ID = 102
    INVALID_FEEDBACK = 103
    DUPLICATE_SUBMISSION = 105
    SUBMISSION_NOT_FOUND = 106
    RATE_LIMIT_EXCEEDED = 107
    ALREADY_INACTIVE = 108
    AUTHORITY_NOT_VERIFIED = 109
    AUTHORITY_ALREADY_SET = 110
    INVALID_AUTHORITY = 111
    TRANSFER_FAILED = 112
    SUBMISSION_CAP_EXCEEDED = 113
    INVALID_CATEGORY = 114
    INVALID_PRIORITY = 115
    INVALID_LOCATION = 116
    INVALID_LANGUAGE = 117
    INVALID_ANONYMITY_LEVEL = 118
    ALREADY_VERIFIED = 119
    INVALID_RATE_LIMIT_PARAMETER = 120
    INVALID_MIN_LENGTH_PARAMETER = 121
    INVALID_MAX_LENGTH_PARAMETER = 122
    INVALID_SUBMISSION_CAP_PARAMETER = 123
    INVALID_FEE_PARAMETER = 124
    AUTHORITY_NOT_SET = 125


class ErrorCategory(str, Enum):
    """How a caller is expected to react to an error.

    Categories:
        POLICY: Input out of range. Resubmit corrected input.
        AUTHORIZATION: Wrong caller or missing authority. Never retried.
        CAPACITY: Cap or rate limit reached. Rate limit may clear only by
            configuration change, the cap likewise.
        TRANSFER: Fee transfer failed. Nothing persisted, safe to retry.
        STATE: Lifecycle transition not permitted from the current state.
        NOT_FOUND: Referenced submission does not exist.
    """

    POLICY = "policy"
    AUTHORIZATION = "authorization"
    CAPACITY = "capacity"
    TRANSFER = "transfer"
    STATE = "state"
    NOT_FOUND = "not_found"
