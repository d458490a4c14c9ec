"""Correlation Middleware: per-request trace identifier and request logging.

Invariants:
    - Every request gets a correlation id: a well-formed X-Correlation-ID
      header is reused, anything else is replaced by a fresh uuid4 hex
    - The id is on request.state, in correlation_id_var, and echoed in the
      X-Correlation-ID response header
    - One INFO record per completed request with request_path extra
      (ExcludePathsFilter keys on it)

Design Decisions:
    - Outermost middleware so the exception middleware's traceId and every log
      record in the request share the same id
"""

import logging
import re
import time
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from employee_service.infrastructure.observability import correlation_id_var

logger = logging.getLogger(__name__)

CORRELATION_ID_HEADER = "X-Correlation-ID"
_VALID_CORRELATION_ID = re.compile(r"^[A-Za-z0-9._\-]{1,128}$")


def get_correlation_id(request: Request) -> str:
    """Correlation id of the request; assigns one if no middleware did."""
    correlation_id = getattr(request.state, "correlation_id", None)
    if correlation_id is None:
        correlation_id = correlation_id_var.get() or uuid4().hex
        request.state.correlation_id = correlation_id
    return correlation_id


def _incoming_correlation_id(request: Request) -> str:
    candidate = request.headers.get(CORRELATION_ID_HEADER)
    if candidate and _VALID_CORRELATION_ID.match(candidate):
        return candidate
    return uuid4().hex


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Assign the correlation id and log each request on completion."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        correlation_id = _incoming_correlation_id(request)
        request.state.correlation_id = correlation_id
        token = correlation_id_var.set(correlation_id)
        started = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers[CORRELATION_ID_HEADER] = correlation_id
            logger.info(
                "HTTP %s %s responded %s",
                request.method, request.url.path, response.status_code,
                extra={
                    "request_path": request.url.path,
                    "method": request.method,
                    "status_code": response.status_code,
                    "duration_ms": round((time.perf_counter() - started) * 1000, 2),
                },
            )
            return response
        finally:
            correlation_id_var.reset(token)
