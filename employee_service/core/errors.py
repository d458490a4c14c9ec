"""Error Hierarchy: typed, categorized exceptions for anticipated failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status
    - to_problem() produces RFC 7807 fields (status, title, type, detail)
    - No internal details leaked in user-facing messages
    - Unanticipated failures are NOT modelled here: they reach the exception
      middleware as plain exceptions

Design Decisions:
    - Single hierarchy with EmployeeServiceError base: one global handler catches all
    - headers carried on the error so handlers stay generic (api-supported-versions)
"""

from enum import Enum

DEFAULT_PROBLEM_TYPE = "https://tools.ietf.org/html/rfc7231#section-6.5.1"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    VERSIONING = "versioning"
    INTERNAL = "internal"


class EmployeeServiceError(Exception):
    """Base exception for all anticipated Employee Service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        *,
        title: str,
        http_status: int = 500,
        type_uri: str = DEFAULT_PROBLEM_TYPE,
        headers: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.title = title
        self.http_status = http_status
        self.type_uri = type_uri
        self.headers = headers or {}

    def to_problem(self) -> dict:
        """Convert to RFC 7807 problem detail fields."""
        return {
            "status": self.http_status,
            "title": self.title,
            "type": self.type_uri,
            "detail": self.message,
        }


class UnsupportedApiVersionError(EmployeeServiceError):
    """Requested API version is not served by this deployment."""
    def __init__(self, requested: str, supported: tuple[str, ...]):
        super().__init__(
            f"The HTTP resource that matches the request URI does not support "
            f"the API version '{requested}'.",
            "UNSUPPORTED_API_VERSION", ErrorCategory.VERSIONING,
            title="Unsupported API version",
            http_status=400,
            headers={"api-supported-versions": ", ".join(supported)},
        )
        self.requested = requested
        self.supported = supported
