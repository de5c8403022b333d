"""FastAPI application entry point for the Feedback Ledger."""

import os

from fastapi import FastAPI

from feedback_ledger import __version__
from feedback_ledger.api.middleware.logging_middleware import LoggingMiddleware
from feedback_ledger.api.routes.health import router as health_router
from feedback_ledger.api.routes.ledger import router as ledger_router
from feedback_ledger.api.routes.metrics import router as metrics_router
from feedback_ledger.bootstrap.logging import configure_logging

configure_logging()

app = FastAPI(
    title="Feedback Ledger API",
    description="Verifiable feedback submission ledger",
    version=__version__,
)

app.add_middleware(LoggingMiddleware)

app.include_router(health_router)
app.include_router(metrics_router)
app.include_router(ledger_router)


def serve() -> None:
    """Run the API with uvicorn (HOST/PORT from the environment)."""
    import uvicorn

    uvicorn.run(
        "feedback_ledger.api.main:app",
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "8000")),
    )
