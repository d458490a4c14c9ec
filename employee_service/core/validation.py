"""Employee Validation: payload-gated identity check.

Invariants:
    - Absent payload → 400 with NULL_BODY_MESSAGE
    - Present payload → 200 with no body
    - Pure and stateless: same input always yields the same result

Design Decisions:
    - ValidationResult is a frozen dataclass rather than an HTTP response so the
      route stays a thin translation layer and this module stays framework-free
"""

from dataclasses import dataclass
from http import HTTPStatus
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from employee_service.schemas.employee import ValidationRequest

NULL_BODY_MESSAGE = "Request body is null."


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation call: an HTTP-equivalent status and optional message."""
    status_code: int
    message: str | None = None

    @property
    def is_success(self) -> bool:
        return self.status_code == HTTPStatus.OK


def validate_employee(request: "ValidationRequest | None") -> ValidationResult:
    if request is None:
        return ValidationResult(HTTPStatus.BAD_REQUEST, NULL_BODY_MESSAGE)
    return ValidationResult(HTTPStatus.OK)
