"""Employee Validation: verifies the payload-gated check is pure and total.

Tests:
    - None → 400 with the exact null-body message
    - Any request object → 200 with no message
    - Repeated calls yield the same result (no hidden state)
"""

from dataclasses import FrozenInstanceError

import pytest

from employee_service.core.validation import (
    NULL_BODY_MESSAGE, ValidationResult, validate_employee,
)
from employee_service.schemas.employee import ValidationRequest


def test_absent_request_is_client_error():
    result = validate_employee(None)
    assert result.status_code == 400
    assert result.message == "Request body is null."
    assert not result.is_success


def test_present_request_is_success_with_empty_body():
    result = validate_employee(ValidationRequest(userId="abc"))
    assert result.status_code == 200
    assert result.message is None
    assert result.is_success


def test_request_without_fields_is_still_success():
    assert validate_employee(ValidationRequest()).is_success


def test_validate_is_idempotent():
    request = ValidationRequest(userId="abc")
    assert validate_employee(request) == validate_employee(request)
    assert validate_employee(None) == validate_employee(None)


def test_result_is_immutable():
    result = ValidationResult(400, NULL_BODY_MESSAGE)
    with pytest.raises(FrozenInstanceError):
        result.status_code = 200
