"""RFC 7807 Problem Details error body."""

from pydantic import BaseModel, ConfigDict, Field

PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"


class ProblemDetails(BaseModel):
    """Problem Details for HTTP APIs.

    See https://datatracker.ietf.org/doc/html/rfc7807

    Extension members (e.g. traceId, errors) are passed as extra keyword
    arguments and serialized after the standard members.
    """
    model_config = ConfigDict(extra="allow", frozen=True)

    status: int = Field(description="HTTP status code.")
    title: str = Field(description="Short human-readable summary of the problem.")
    type: str = Field(
        default="about:blank",
        description="URI reference identifying the problem type.",
    )
    detail: str | None = Field(
        default=None,
        description="Human-readable explanation specific to this occurrence.",
    )

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)
