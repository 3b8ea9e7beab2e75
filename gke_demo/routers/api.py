"""Welcome and application-info routes."""

from __future__ import annotations

from gke_demo import handlers
from gke_demo.core.config import BuildInfo
from gke_demo.routers.table import Route
from gke_demo.schemas.responses import InfoResponse, WelcomeResponse


def build_api_routes(build: BuildInfo) -> tuple[Route, ...]:
    """Bind ``GET /`` and ``GET /api/info`` to the given build constants."""

    async def home() -> WelcomeResponse:
        return handlers.welcome(build)

    async def info() -> InfoResponse:
        return handlers.info(build)

    return (
        Route("GET", "/", home, WelcomeResponse, name="home", summary="Welcome message"),
        Route(
            "GET",
            "/api/info",
            info,
            InfoResponse,
            name="info",
            summary="Application info",
            tags=("info",),
        ),
    )
