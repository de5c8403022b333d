"""Feedback Ledger API routes.

FastAPI router for the ledger's configuration, submission and lifecycle
operations. The caller identity comes from the X-Caller-Identity header.

Every rejected operation is returned as an RFC 7807 problem carrying the
ledger error code and kind. Status codes follow the error category:

- policy (validation, bad parameters)    400
- authorization                          403
- not found                              404
- state conflicts, missing authority     409
- capacity (rate limit, submission cap)  429
- fee transfer failure                   402
"""

import re

from fastapi import APIRouter, Depends, HTTPException, Request

from feedback_ledger.api.dependencies.ledger import (
    get_caller_identity,
    get_feedback_ledger_service,
)
from feedback_ledger.api.models.ledger import (
    AmendmentResponse,
    AuthorityResponse,
    ConfigurationResponse,
    LedgerErrorResponse,
    ParameterUpdatedResponse,
    PolicyParameterEnum,
    SetAuthorityRequest,
    SetParameterRequest,
    SubmissionCountResponse,
    SubmissionExistsResponse,
    SubmissionOperationResponse,
    SubmissionResponse,
    SubmissionUpdatesResponse,
    SubmitFeedbackRequest,
    SubmitFeedbackResponse,
    SubmitterSubmissionsResponse,
    UpdateSubmissionRequest,
)
from feedback_ledger.application.services.feedback_ledger_service import (
    FeedbackLedgerService,
)
from feedback_ledger.domain.errors import (
    ErrorCategory,
    ErrorCode,
    LedgerError,
    SubmissionNotFoundError,
)

router = APIRouter(prefix="/v1/ledger", tags=["ledger"])

_CATEGORY_STATUS: dict[ErrorCategory, int] = {
    ErrorCategory.POLICY: 400,
    ErrorCategory.AUTHORIZATION: 403,
    ErrorCategory.NOT_FOUND: 404,
    ErrorCategory.STATE: 409,
    ErrorCategory.CAPACITY: 429,
    ErrorCategory.TRANSFER: 402,
}

# Authority lifecycle conflicts are state problems, not permission problems.
_CODE_STATUS: dict[ErrorCode, int] = {
    ErrorCode.AUTHORITY_NOT_VERIFIED: 409,
    ErrorCode.AUTHORITY_NOT_SET: 409,
    ErrorCode.AUTHORITY_ALREADY_SET: 409,
}

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": LedgerErrorResponse, "description": "Invalid value"},
    402: {"model": LedgerErrorResponse, "description": "Fee transfer failed"},
    403: {"model": LedgerErrorResponse, "description": "Not authorized"},
    404: {"model": LedgerErrorResponse, "description": "Submission not found"},
    409: {"model": LedgerErrorResponse, "description": "State conflict"},
    429: {"model": LedgerErrorResponse, "description": "Rate limit or cap reached"},
}

_SETTERS: dict[PolicyParameterEnum, str] = {
    PolicyParameterEnum.FEE: "set_submission_fee",
    PolicyParameterEnum.RATE_LIMIT: "set_rate_limit_per_user",
    PolicyParameterEnum.MIN_FEEDBACK_LENGTH: "set_min_feedback_length",
    PolicyParameterEnum.MAX_FEEDBACK_LENGTH: "set_max_feedback_length",
    PolicyParameterEnum.MAX_SUBMISSIONS: "set_max_submissions",
}


def _kebab(kind: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "-", kind).lower()


def _title(kind: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", " ", kind)


def error_status(error: LedgerError) -> int:
    """Map a ledger error to its HTTP status code."""
    return _CODE_STATUS.get(error.code, _CATEGORY_STATUS[error.category])


def ledger_problem(error: LedgerError, request: Request) -> HTTPException:
    """Build the RFC 7807 HTTPException for a ledger error."""
    status = error_status(error)
    return HTTPException(
        status_code=status,
        detail={
            "type": f"urn:feedback-ledger:error:{_kebab(error.kind)}",
            "title": _title(error.kind),
            "status": status,
            "detail": str(error),
            "instance": str(request.url),
            "code": int(error.code),
            "kind": error.kind,
        },
    )


# =============================================================================
# Configuration Endpoints
# =============================================================================


@router.get(
    "/config",
    response_model=ConfigurationResponse,
    summary="Get ledger policy",
)
async def get_configuration(
    service: FeedbackLedgerService = Depends(get_feedback_ledger_service),
) -> ConfigurationResponse:
    return ConfigurationResponse.from_snapshot(await service.get_configuration())


@router.put(
    "/config/authority",
    response_model=AuthorityResponse,
    responses=_ERROR_RESPONSES,
    summary="Set the ledger authority (once)",
)
async def set_authority(
    request_data: SetAuthorityRequest,
    request: Request,
    caller: str = Depends(get_caller_identity),
    service: FeedbackLedgerService = Depends(get_feedback_ledger_service),
) -> AuthorityResponse:
    try:
        authority = await service.set_authority_contract(caller, request_data.authority)
    except LedgerError as e:
        raise ledger_problem(e, request) from None
    return AuthorityResponse(authority=authority)


@router.put(
    "/config/{parameter}",
    response_model=ParameterUpdatedResponse,
    responses=_ERROR_RESPONSES,
    summary="Change a policy parameter",
)
async def set_parameter(
    parameter: PolicyParameterEnum,
    request_data: SetParameterRequest,
    request: Request,
    caller: str = Depends(get_caller_identity),
    service: FeedbackLedgerService = Depends(get_feedback_ledger_service),
) -> ParameterUpdatedResponse:
    setter = getattr(service, _SETTERS[parameter])
    try:
        value = await setter(caller, request_data.value)
    except LedgerError as e:
        raise ledger_problem(e, request) from None
    return ParameterUpdatedResponse(parameter=parameter, value=value)


# =============================================================================
# Submission Endpoints
# =============================================================================


@router.post(
    "/submissions",
    response_model=SubmitFeedbackResponse,
    status_code=201,
    responses=_ERROR_RESPONSES,
    summary="Submit feedback",
    description=(
        "File a feedback submission. Charges the submission fee to the "
        "caller and counts against the caller's lifetime rate limit."
    ),
)
async def submit_feedback(
    request_data: SubmitFeedbackRequest,
    request: Request,
    caller: str = Depends(get_caller_identity),
    service: FeedbackLedgerService = Depends(get_feedback_ledger_service),
) -> SubmitFeedbackResponse:
    try:
        submission_id = await service.submit_feedback(
            caller=caller,
            service_id=request_data.service_id,
            feedback_text=request_data.feedback_text,
            category=request_data.category,
            priority=request_data.priority,
            location=request_data.location,
            language=request_data.language,
            anonymity_level=request_data.anonymity_level,
        )
    except LedgerError as e:
        raise ledger_problem(e, request) from None
    return SubmitFeedbackResponse(submission_id=submission_id)


@router.get(
    "/submissions/count",
    response_model=SubmissionCountResponse,
    summary="Count accepted submissions",
)
async def get_submission_count(
    service: FeedbackLedgerService = Depends(get_feedback_ledger_service),
) -> SubmissionCountResponse:
    return SubmissionCountResponse(count=await service.get_submission_count())


@router.get(
    "/submissions/{submission_id}",
    response_model=SubmissionResponse,
    responses={404: _ERROR_RESPONSES[404]},
    summary="Get a submission",
)
async def get_submission(
    submission_id: int,
    request: Request,
    service: FeedbackLedgerService = Depends(get_feedback_ledger_service),
) -> SubmissionResponse:
    record = await service.get_submission(submission_id)
    if record is None:
        raise ledger_problem(SubmissionNotFoundError(submission_id), request)
    return SubmissionResponse.from_record(record)


@router.get(
    "/submissions/{submission_id}/exists",
    response_model=SubmissionExistsResponse,
    summary="Check whether a submission exists",
)
async def check_submission_existence(
    submission_id: int,
    service: FeedbackLedgerService = Depends(get_feedback_ledger_service),
) -> SubmissionExistsResponse:
    exists = await service.check_submission_existence(submission_id)
    return SubmissionExistsResponse(submission_id=submission_id, exists=exists)


@router.get(
    "/submissions/{submission_id}/updates",
    response_model=SubmissionUpdatesResponse,
    summary="Get the latest amendment of a submission",
)
async def get_submission_updates(
    submission_id: int,
    service: FeedbackLedgerService = Depends(get_feedback_ledger_service),
) -> SubmissionUpdatesResponse:
    amendment = await service.get_submission_updates(submission_id)
    return SubmissionUpdatesResponse(
        submission_id=submission_id,
        amendment=AmendmentResponse.from_record(amendment) if amendment else None,
    )


# =============================================================================
# Lifecycle Endpoints
# =============================================================================


@router.patch(
    "/submissions/{submission_id}",
    response_model=SubmissionOperationResponse,
    responses=_ERROR_RESPONSES,
    summary="Amend own submission",
)
async def update_submission(
    submission_id: int,
    request_data: UpdateSubmissionRequest,
    request: Request,
    caller: str = Depends(get_caller_identity),
    service: FeedbackLedgerService = Depends(get_feedback_ledger_service),
) -> SubmissionOperationResponse:
    try:
        success = await service.update_submission(
            caller=caller,
            submission_id=submission_id,
            feedback_text=request_data.feedback_text,
            category=request_data.category,
            priority=request_data.priority,
        )
    except LedgerError as e:
        raise ledger_problem(e, request) from None
    return SubmissionOperationResponse(submission_id=submission_id, success=success)


@router.post(
    "/submissions/{submission_id}/verify",
    response_model=SubmissionOperationResponse,
    responses=_ERROR_RESPONSES,
    summary="Verify a submission",
)
async def verify_submission(
    submission_id: int,
    request: Request,
    caller: str = Depends(get_caller_identity),
    service: FeedbackLedgerService = Depends(get_feedback_ledger_service),
) -> SubmissionOperationResponse:
    try:
        success = await service.verify_submission(caller, submission_id)
    except LedgerError as e:
        raise ledger_problem(e, request) from None
    return SubmissionOperationResponse(submission_id=submission_id, success=success)


@router.post(
    "/submissions/{submission_id}/deactivate",
    response_model=SubmissionOperationResponse,
    responses=_ERROR_RESPONSES,
    summary="Deactivate own submission",
)
async def deactivate_submission(
    submission_id: int,
    request: Request,
    caller: str = Depends(get_caller_identity),
    service: FeedbackLedgerService = Depends(get_feedback_ledger_service),
) -> SubmissionOperationResponse:
    try:
        success = await service.deactivate_submission(caller, submission_id)
    except LedgerError as e:
        raise ledger_problem(e, request) from None
    return SubmissionOperationResponse(submission_id=submission_id, success=success)


# =============================================================================
# Submitter Endpoints
# =============================================================================


@router.get(
    "/submitters/{identity}/submissions",
    response_model=SubmitterSubmissionsResponse,
    summary="List submissions filed by an identity",
)
async def get_submissions_by_submitter(
    identity: str,
    service: FeedbackLedgerService = Depends(get_feedback_ledger_service),
) -> SubmitterSubmissionsResponse:
    submission_ids, remaining = await service.get_submitter_summary(identity)
    return SubmitterSubmissionsResponse(
        submitter=identity,
        submission_ids=submission_ids,
        remaining_submissions=remaining,
    )
