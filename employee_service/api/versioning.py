"""API Versioning: URL-segment version resolution.

Invariants:
    - "1" and "1.0" both resolve to "1.0"; a bare major implies minor 0
    - Unsupported or malformed versions raise UnsupportedApiVersionError (400)
    - Versioned responses report api-supported-versions, error responses included
"""

import re

from fastapi import Response

from employee_service.core.errors import UnsupportedApiVersionError

DEFAULT_API_VERSION = "1.0"
SUPPORTED_API_VERSIONS: tuple[str, ...] = ("1.0",)
SUPPORTED_VERSIONS_HEADER = "api-supported-versions"

_VERSION_PATTERN = re.compile(r"^(\d+)(?:\.(\d+))?$")
_VERSIONED_PATH = re.compile(r"^/employees/v[^/]+/")


def normalize_api_version(raw: str) -> str | None:
    """Return "major.minor" for a well-formed version segment, else None."""
    match = _VERSION_PATTERN.match(raw.strip())
    if not match:
        return None
    major, minor = match.group(1), match.group(2) or "0"
    return f"{int(major)}.{int(minor)}"


async def resolve_api_version(version: str) -> str:
    """FastAPI dependency: resolve the {version} path segment."""
    normalized = normalize_api_version(version)
    if normalized not in SUPPORTED_API_VERSIONS:
        raise UnsupportedApiVersionError(version, SUPPORTED_API_VERSIONS)
    return normalized


def api_version_headers(path: str) -> dict[str, str]:
    """Supported-versions header for versioned paths; empty for anything else."""
    if _VERSIONED_PATH.match(path):
        return {SUPPORTED_VERSIONS_HEADER: ", ".join(SUPPORTED_API_VERSIONS)}
    return {}


def report_api_versions(response: Response) -> Response:
    response.headers[SUPPORTED_VERSIONS_HEADER] = ", ".join(SUPPORTED_API_VERSIONS)
    return response
