"""Health check endpoint for the Feedback Ledger API."""

from fastapi import APIRouter, Depends

from feedback_ledger.api.dependencies.ledger import get_feedback_ledger_service
from feedback_ledger.api.models.health import HealthResponse
from feedback_ledger.application.services.feedback_ledger_service import (
    FeedbackLedgerService,
)

router = APIRouter(prefix="/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    service: FeedbackLedgerService = Depends(get_feedback_ledger_service),
) -> HealthResponse:
    """Return health status.

    Returns:
        Health status with 200 OK.
    """
    configuration = await service.get_configuration()
    return HealthResponse(
        status="healthy",
        submission_count=await service.get_submission_count(),
        authority_set=configuration.has_authority,
    )
