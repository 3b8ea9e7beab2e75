"""Request handlers.

Each handler is a standalone function of the build constants and of the
current time or environment. Nothing is cached between calls.
"""

from __future__ import annotations

import platform
from datetime import datetime, timezone

from gke_demo.core.config import BuildInfo
from gke_demo.schemas.responses import HealthResponse, InfoResponse, WelcomeResponse

RUNNING = "running"
UP = "UP"
DOWN = "DOWN"


def welcome(build: BuildInfo, now: datetime | None = None) -> WelcomeResponse:
    """Greeting with the service version and the time of the request."""
    now = now or datetime.now(timezone.utc)
    return WelcomeResponse(
        message=build.message,
        version=build.version,
        timestamp=now.isoformat(),
        status=RUNNING,
    )


def health() -> HealthResponse:
    """Liveness: reaching this handler means the process is up."""
    return HealthResponse(status=UP)


def info(build: BuildInfo) -> InfoResponse:
    return InfoResponse(
        application=build.application,
        version=build.version,
        runtime_version=platform.python_version(),
        framework_version=build.framework_version,
    )
