"""Health Report: runs registered readiness checks into a health-UI style report.

Invariants:
    - Overall status is Healthy iff every check is Healthy (no checks → Healthy)
    - A check that raises is Unhealthy; its exception is logged, not reported
    - Durations are rendered as "hh:mm:ss.fffffff"
"""

import logging
import time
from typing import Awaitable, Callable, Mapping

logger = logging.getLogger(__name__)

HEALTHY = "Healthy"
UNHEALTHY = "Unhealthy"

HealthCheck = Callable[[], Awaitable[bool]]


def format_duration(seconds: float) -> str:
    ticks = int(round(seconds * 10_000_000))
    total_seconds, fraction = divmod(ticks, 10_000_000)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}.{fraction:07d}"


async def _run_check(name: str, check: HealthCheck) -> tuple[str, float]:
    started = time.perf_counter()
    try:
        healthy = await check()
    except Exception:
        logger.exception(f"Health check '{name}' failed")
        healthy = False
    return (HEALTHY if healthy else UNHEALTHY), time.perf_counter() - started


async def build_health_report(checks: Mapping[str, HealthCheck]) -> dict:
    """Run every check sequentially and aggregate the report."""
    started = time.perf_counter()
    entries = {}
    for name, check in checks.items():
        check_status, elapsed = await _run_check(name, check)
        entries[name] = {"status": check_status, "duration": format_duration(elapsed)}
    overall = HEALTHY if all(
        entry["status"] == HEALTHY for entry in entries.values()
    ) else UNHEALTHY
    return {
        "status": overall,
        "totalDuration": format_duration(time.perf_counter() - started),
        "entries": entries,
    }
