"""Employee Schemas: validation request payload.

Invariants:
    - Any JSON object is a valid request; only presence matters to the handler
    - userId is optional and must be a string when given

Design Decisions:
    - extra="allow": callers may send additional identity fields without a 400
"""

from pydantic import BaseModel, ConfigDict, Field


class ValidationRequest(BaseModel):
    """Employee identity validation request."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    user_id: str | None = Field(None, alias="userId")
