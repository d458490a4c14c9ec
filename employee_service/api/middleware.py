"""Exception Handling Middleware: last line of defense for unhandled failures.

Invariants:
    - Downstream responses pass through untouched
    - Any exception escaping downstream becomes a 500 application/problem+json
      response; it is never re-raised past this boundary
    - The failure is always logged with full detail (exc_info), in every environment
    - Outside development, detail is the fixed GENERIC_DETAIL sentence and no
      traceId is attached (no message, type or traceback leaks)
    - A failure while serializing the problem body is NOT caught (no fallback)
    - Failures on versioned paths still report api-supported-versions

Design Decisions:
    - is_development and logger are constructor arguments, not ambient globals,
      so the middleware is testable in isolation
    - intercept() takes the downstream as a zero-arg callable; dispatch() adapts
      Starlette's call_next to it
    - No retries: one failure boundary per request
"""

import logging
import traceback
from typing import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from employee_service.api.correlation import get_correlation_id
from employee_service.api.error_handlers import problem_response
from employee_service.api.versioning import api_version_headers
from employee_service.core.errors import ErrorCategory
from employee_service.schemas.problem import ProblemDetails

INTERNAL_ERROR_STATUS = 500
INTERNAL_ERROR_TITLE = "An error occurred while processing your request."
INTERNAL_ERROR_TYPE = "https://tools.ietf.org/html/rfc7807#section-3.1"
GENERIC_DETAIL = "An unexpected error occurred."


def build_internal_error_problem(
    exc: BaseException, *, is_development: bool, trace_id: str | None = None,
) -> ProblemDetails:
    """Build the 500 problem body; verbose only in development."""
    if not is_development:
        return ProblemDetails(
            status=INTERNAL_ERROR_STATUS,
            title=INTERNAL_ERROR_TITLE,
            type=INTERNAL_ERROR_TYPE,
            detail=GENERIC_DETAIL,
        )
    detail = "".join(
        traceback.format_exception(type(exc), exc, exc.__traceback__),
    )
    extensions = {"traceId": trace_id} if trace_id is not None else {}
    return ProblemDetails(
        status=INTERNAL_ERROR_STATUS,
        title=INTERNAL_ERROR_TITLE,
        type=INTERNAL_ERROR_TYPE,
        detail=detail,
        **extensions,
    )


class ExceptionHandlingMiddleware(BaseHTTPMiddleware):
    """Translate unhandled downstream exceptions into RFC 7807 responses."""

    def __init__(
        self,
        app: ASGIApp,
        is_development: bool = False,
        logger: logging.Logger | None = None,
    ):
        super().__init__(app)
        self.is_development = is_development
        self.logger = logger or logging.getLogger(__name__)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        return await self.intercept(request, lambda: call_next(request))

    async def intercept(
        self, request: Request, downstream: Callable[[], Awaitable[Response]],
    ) -> Response:
        try:
            return await downstream()
        except Exception as exc:
            self.logger.error(
                "An unhandled exception occurred: %s", exc,
                exc_info=True,
                extra={
                    "path": request.url.path,
                    "error_code": "INTERNAL_ERROR",
                    "category": ErrorCategory.INTERNAL.value,
                },
            )
            trace_id = get_correlation_id(request) if self.is_development else None
            problem = build_internal_error_problem(
                exc, is_development=self.is_development, trace_id=trace_id,
            )
            return problem_response(
                problem, headers=api_version_headers(request.url.path),
            )
