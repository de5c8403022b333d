"""Per-request logging for the ledger API.

Each request runs under a correlation id (taken from X-Correlation-ID or
freshly generated) that is echoed back on the response. The caller
identity header is bound into the request's log context so a rejected
ledger operation can be traced to the request that caused it.
"""

import time
from collections.abc import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from feedback_ledger.api.dependencies.ledger import CALLER_HEADER
from feedback_ledger.infrastructure.observability.correlation import begin_request

CORRELATION_HEADER = "X-Correlation-ID"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Correlation id propagation and request start/finish logging."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        correlation_id = begin_request(request.headers.get(CORRELATION_HEADER))
        log = structlog.get_logger("feedback_ledger.http").bind(
            method=request.method,
            path=request.url.path,
            caller=request.headers.get(CALLER_HEADER),
        )
        started = time.perf_counter()
        log.debug("request_started")

        try:
            response = await call_next(request)
        except Exception as exc:
            log.exception(
                "request_failed",
                duration_ms=_elapsed_ms(started),
                error_type=type(exc).__name__,
            )
            raise

        log_method = log.warning if response.status_code >= 400 else log.info
        log_method(
            "request_completed",
            status_code=response.status_code,
            duration_ms=_elapsed_ms(started),
        )
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
