"""Health & Readiness Probes: liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /employees/liveness always returns 200 if the process is up
    - GET /employees/readiness returns 503 if any registered readiness check fails
    - Readiness checks live on app.state.readiness_checks (name → async callable)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from
      the load balancer
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from employee_service.core.health import HEALTHY, build_health_report

router = APIRouter(prefix="/employees", tags=["health"])


@router.get("/liveness", status_code=status.HTTP_200_OK)
async def liveness_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": HEALTHY}


@router.get("/readiness")
async def readiness_check(request: Request):
    """Readiness probe: aggregates registered readiness checks."""
    checks = getattr(request.app.state, "readiness_checks", {})
    report = await build_health_report(checks)
    code = (
        status.HTTP_200_OK if report["status"] == HEALTHY
        else status.HTTP_503_SERVICE_UNAVAILABLE
    )
    return JSONResponse(status_code=code, content=report)
