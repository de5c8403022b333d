"""Feedback Ledger API request/response models.

Pydantic models for the /v1/ledger endpoints. Request models only check
wire types; the ledger's own validation decides whether values such as
category or priority are acceptable, so clients always get the ledger's
error code for a bad value.
"""

from enum import Enum

from pydantic import BaseModel, Field

from feedback_ledger.domain.models.amendment import AmendmentRecord
from feedback_ledger.domain.models.ledger_configuration import ConfigurationSnapshot
from feedback_ledger.domain.models.submission import SubmissionRecord


class PolicyParameterEnum(str, Enum):
    """Policy parameters that can be changed through PUT /config/{parameter}."""

    FEE = "fee"
    RATE_LIMIT = "rate-limit"
    MIN_FEEDBACK_LENGTH = "min-feedback-length"
    MAX_FEEDBACK_LENGTH = "max-feedback-length"
    MAX_SUBMISSIONS = "max-submissions"


# Configuration


class SetAuthorityRequest(BaseModel):
    """Request to fix the ledger authority."""

    authority: str = Field(..., description="Identity that receives fees")


class AuthorityResponse(BaseModel):
    authority: str


class SetParameterRequest(BaseModel):
    """Request to change one policy parameter."""

    value: int = Field(..., description="New parameter value")


class ParameterUpdatedResponse(BaseModel):
    parameter: PolicyParameterEnum
    value: int


class ConfigurationResponse(BaseModel):
    """Current ledger policy."""

    authority: str | None
    fee: int
    rate_limit_per_identity: int
    min_feedback_length: int
    max_feedback_length: int
    submission_cap: int
    require_authority_caller: bool

    @classmethod
    def from_snapshot(cls, snapshot: ConfigurationSnapshot) -> "ConfigurationResponse":
        return cls(**snapshot.to_dict())


# Submissions


class SubmitFeedbackRequest(BaseModel):
    """Request to file a feedback submission.

    Attributes:
        service_id: Service the feedback is about (positive).
        feedback_text: Feedback body, length bounded by ledger policy.
        category: service-quality, access or efficiency.
        priority: 1 (lowest) to 5 (highest).
        location: Where the feedback originates, 1-100 characters.
        language: english, arabic or french.
        anonymity_level: 1 to 3.
    """

    service_id: int = Field(..., description="Service reference")
    feedback_text: str = Field(..., description="Feedback body")
    category: str = Field(..., description="Feedback category")
    priority: int = Field(..., description="Priority 1-5")
    location: str = Field(..., description="Location, 1-100 characters")
    language: str = Field(..., description="Feedback language")
    anonymity_level: int = Field(..., description="Anonymity level 1-3")


class SubmitFeedbackResponse(BaseModel):
    submission_id: int


class UpdateSubmissionRequest(BaseModel):
    """Request to amend a submission's content."""

    feedback_text: str = Field(..., description="New feedback body")
    category: str = Field(..., description="New feedback category")
    priority: int = Field(..., description="New priority 1-5")


class SubmissionOperationResponse(BaseModel):
    """Result of amend, verify or deactivate."""

    submission_id: int
    success: bool


class SubmissionResponse(BaseModel):
    """A stored submission record."""

    id: int
    service_id: int
    feedback_text: str
    submitter: str
    created_at: int
    category: str
    priority: int
    location: str
    language: str
    anonymity_level: int
    active: bool
    verified: bool
    state: str

    @classmethod
    def from_record(cls, record: SubmissionRecord) -> "SubmissionResponse":
        return cls(**record.to_dict(), state=record.state.value)


class AmendmentResponse(BaseModel):
    submission_id: int
    feedback_text: str
    category: str
    priority: int
    timestamp: int
    amended_by: str

    @classmethod
    def from_record(cls, amendment: AmendmentRecord) -> "AmendmentResponse":
        return cls(**amendment.to_dict())


class SubmissionUpdatesResponse(BaseModel):
    """Latest amendment of a submission (None if never amended)."""

    submission_id: int
    amendment: AmendmentResponse | None = None


class SubmissionCountResponse(BaseModel):
    count: int


class SubmissionExistsResponse(BaseModel):
    submission_id: int
    exists: bool


class SubmitterSubmissionsResponse(BaseModel):
    """Submissions filed by one identity."""

    submitter: str
    submission_ids: list[int]
    remaining_submissions: int


class LedgerErrorResponse(BaseModel):
    """RFC 7807 problem details for a rejected ledger operation.

    Attributes:
        type: Error type URI.
        title: Human-readable error title.
        status: HTTP status code.
        detail: Detailed error message.
        instance: Request path that caused the error.
        code: Stable ledger error code.
        kind: Ledger error kind, e.g. RateLimitExceeded.
    """

    type: str = Field(..., description="Error type URI")
    title: str = Field(..., description="Human-readable error title")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Detailed error message")
    instance: str = Field(..., description="Request path that caused the error")
    code: int = Field(..., description="Ledger error code")
    kind: str = Field(..., description="Ledger error kind")
