"""Health check response models."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response model.

    Attributes:
        status: Health status string (e.g., "healthy").
        submission_count: Accepted submissions held by the ledger.
        authority_set: Whether the ledger authority has been fixed.
    """

    status: str
    submission_count: int
    authority_set: bool
