"""Employee Routes: versioned identity validation endpoint.

Invariants:
    - POST /employees/v{version}/validate is the only validate route (no GET variant)
    - Missing or JSON-null body → 400 text/plain "Request body is null."
    - Any JSON object body → 200 with an empty body
    - Version resolved before the body is inspected
"""

import logging

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import PlainTextResponse, Response

from employee_service.api.versioning import report_api_versions, resolve_api_version
from employee_service.core.validation import validate_employee
from employee_service.schemas.employee import ValidationRequest

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/employees/v{version}", tags=["employees"])


@router.post(
    "/validate",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses={
        status.HTTP_200_OK: {"description": "Employee identity accepted."},
        status.HTTP_400_BAD_REQUEST: {
            "description": "Request body is null or malformed.",
        },
    },
)
async def validate(
    body: ValidationRequest | None = Body(default=None),
    api_version: str = Depends(resolve_api_version),
) -> Response:
    """Validate an employee identity payload."""
    result = validate_employee(body)
    if result.is_success:
        response = Response(status_code=result.status_code)
    else:
        logger.info(
            "Rejected validation request: %s", result.message,
            extra={"api_version": api_version},
        )
        response = PlainTextResponse(result.message, status_code=result.status_code)
    return report_api_versions(response)
