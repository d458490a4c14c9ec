"""Problem Details & Validation Request: boundary schema behaviour."""

import json

import pytest
from pydantic import ValidationError

from employee_service.schemas.employee import ValidationRequest
from employee_service.schemas.problem import ProblemDetails


def test_problem_serializes_standard_members_in_order():
    problem = ProblemDetails(status=500, title="t", type="urn:x", detail="d")
    assert problem.to_json() == '{"status":500,"title":"t","type":"urn:x","detail":"d"}'


def test_problem_extensions_follow_standard_members():
    problem = ProblemDetails(status=400, title="t", traceId="cid")
    assert list(json.loads(problem.to_json())) == ["status", "title", "type", "traceId"]


def test_problem_is_frozen():
    problem = ProblemDetails(status=500, title="t")
    with pytest.raises(ValidationError):
        problem.status = 400


def test_validation_request_accepts_alias_and_extras():
    request = ValidationRequest.model_validate({"userId": "abc", "department": "ops"})
    assert request.user_id == "abc"
    assert request.model_extra == {"department": "ops"}


def test_validation_request_rejects_non_string_user_id():
    with pytest.raises(ValidationError):
        ValidationRequest.model_validate({"userId": ["abc"]})
