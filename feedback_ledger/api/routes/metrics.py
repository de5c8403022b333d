"""Metrics endpoint for Prometheus scraping.

Exposes the ledger's operational counters in Prometheus exposition
format. Ledger content is never exported here.
"""

from fastapi import APIRouter, Response

from feedback_ledger.bootstrap.metrics import (
    get_metrics_collector,
    get_metrics_content_type,
)

router = APIRouter(prefix="/v1", tags=["metrics"])


@router.get(
    "/metrics",
    summary="Prometheus metrics endpoint",
    description="Returns operational metrics in Prometheus exposition format for scraping.",
    response_class=Response,
    responses={
        200: {
            "description": "Metrics in Prometheus format",
            "content": {"text/plain": {}},
        }
    },
)
async def get_metrics() -> Response:
    """Get operational metrics in Prometheus format."""
    return Response(
        content=get_metrics_collector().generate(),
        media_type=get_metrics_content_type(),
    )
