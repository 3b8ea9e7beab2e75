"""Health-check routes for the container orchestrator.

``/health`` and ``/health/live`` report process liveness only.
``/health/ready`` runs the readiness checks given at startup; all of them
must succeed for the instance to receive traffic.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence

from fastapi import Response, status

from gke_demo import handlers
from gke_demo.routers.table import Route
from gke_demo.schemas.responses import HealthResponse, ReadinessResponse

HealthCheck = Callable[[], Awaitable[bool]]


async def _run_check(check: HealthCheck) -> tuple[str, str]:
    name = getattr(check, "__name__", str(check))
    try:
        ok = await check()
    except Exception as exc:
        return name, f"error: {exc}"
    return name, "ok" if ok else "failing"


async def check_readiness(checks: Sequence[HealthCheck]) -> ReadinessResponse:
    """Run all checks concurrently and fold them into one status.

    Args:
        checks: Async callables returning True if healthy.

    Returns:
        ``UP`` when every check reports ``ok`` (or there are none), else ``DOWN``.
        Repeated check names are reported as ``name#2``, ``name#3`` and so on.
    """
    outcomes = await asyncio.gather(*(_run_check(check) for check in checks))
    all_ok = all(result == "ok" for _, result in outcomes)

    results: dict[str, str] = {}
    for name, result in outcomes:
        key, n = name, 1
        while key in results:
            n += 1
            key = f"{name}#{n}"
        results[key] = result

    return ReadinessResponse(
        status=handlers.UP if all_ok else handlers.DOWN,
        checks=results,
    )


def build_health_routes(
    readiness_checks: Sequence[HealthCheck] = (),
) -> tuple[Route, ...]:
    """Bind the liveness and readiness probes."""
    checks = tuple(readiness_checks)

    async def health() -> HealthResponse:
        return handlers.health()

    async def readiness(response: Response) -> ReadinessResponse:
        result = await check_readiness(checks)
        if result.status == handlers.DOWN:
            response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return result

    return (
        Route(
            "GET", "/health", health, HealthResponse,
            name="health", summary="Liveness probe", tags=("health",),
        ),
        Route(
            "GET", "/health/live", health, HealthResponse,
            name="liveness", summary="Liveness probe", tags=("health",),
        ),
        Route(
            "GET", "/health/ready", readiness, ReadinessResponse,
            name="readiness", summary="Readiness probe", tags=("health",),
        ),
    )
