"""Error Handlers: global exception handlers for anticipated failures.

Invariants:
    - EmployeeServiceError → problem details with the error's status and headers
    - RequestValidationError → 400 problem details with field-level errors
    - Framework HTTPException (unparseable body, 404, 405) → problem details
      with the exception's status, detail and headers (405 keeps Allow)
    - Errors on versioned paths report api-supported-versions
    - Unanticipated exceptions are NOT handled here (ExceptionHandlingMiddleware owns them)

Design Decisions:
    - Three-layer handler: domain (EmployeeServiceError), validation (Pydantic),
      framework (Starlette HTTPException)
    - problem_response() is the single place a ProblemDetails becomes an HTTP
      response, shared with the middleware
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from employee_service.api.correlation import get_correlation_id
from employee_service.api.versioning import api_version_headers
from employee_service.core.errors import DEFAULT_PROBLEM_TYPE, EmployeeServiceError
from employee_service.schemas.problem import PROBLEM_JSON_MEDIA_TYPE, ProblemDetails

logger = logging.getLogger(__name__)

VALIDATION_ERROR_TITLE = "One or more validation errors occurred."


def problem_response(
    problem: ProblemDetails, headers: dict[str, str] | None = None,
) -> Response:
    """Serialize a problem body as an application/problem+json response."""
    return Response(
        content=problem.to_json(),
        status_code=problem.status,
        media_type=PROBLEM_JSON_MEDIA_TYPE,
        headers=headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(EmployeeServiceError)
    async def domain_error_handler(request: Request, exc: EmployeeServiceError):
        """Handle all anticipated Employee Service errors."""
        logger.warning(
            f"EmployeeServiceError: {exc.message}",
            extra={
                "error_code": exc.code,
                "category": exc.category.value,
                "path": request.url.path,
            },
        )
        return problem_response(
            ProblemDetails(**exc.to_problem()),
            headers={**api_version_headers(request.url.path), **exc.headers},
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return problem_response(
            _build_validation_problem(exc, get_correlation_id(request)),
            headers=api_version_headers(request.url.path),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP errors raised by routing and body parsing."""
        logger.warning(
            f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}",
            extra={"error_code": "HTTP_ERROR", "path": request.url.path},
        )
        return problem_response(
            _build_http_problem(exc, get_correlation_id(request)),
            headers={**api_version_headers(request.url.path), **(exc.headers or {})},
        )


def _build_http_problem(
    exc: StarletteHTTPException, trace_id: str,
) -> ProblemDetails:
    """Build problem body for a framework HTTP error."""
    try:
        title = HTTPStatus(exc.status_code).phrase
    except ValueError:
        title = "HTTP error"
    return ProblemDetails(
        status=exc.status_code,
        title=title,
        type=(
            DEFAULT_PROBLEM_TYPE if exc.status_code == status.HTTP_400_BAD_REQUEST
            else "about:blank"
        ),
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        traceId=trace_id,
    )


def _build_validation_problem(
    exc: RequestValidationError, trace_id: str,
) -> ProblemDetails:
    """Build structured validation problem body."""
    return ProblemDetails(
        status=status.HTTP_400_BAD_REQUEST,
        title=VALIDATION_ERROR_TITLE,
        type=DEFAULT_PROBLEM_TYPE,
        errors=[
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
        traceId=trace_id,
    )
