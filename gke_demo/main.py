"""GKE Demo — FastAPI application factory.

Serves a welcome message, an orchestrator health check and a static
application-info report.
"""

from __future__ import annotations

from collections.abc import Sequence

from fastapi import FastAPI

from gke_demo.core.config import BUILD_INFO, BuildInfo, Settings, settings
from gke_demo.core.errors import register_error_handlers
from gke_demo.core.events import lifespan
from gke_demo.core.logging import setup_logging
from gke_demo.core.middleware import RequestContextMiddleware
from gke_demo.routers.api import build_api_routes
from gke_demo.routers.health import HealthCheck, build_health_routes
from gke_demo.routers.table import create_router


def create_app(
    app_settings: Settings | None = None,
    build: BuildInfo = BUILD_INFO,
    readiness_checks: Sequence[HealthCheck] = (),
) -> FastAPI:
    """Construct and return the FastAPI application."""
    app_settings = app_settings or settings
    setup_logging(
        log_level=app_settings.log_level,
        json_logs=app_settings.json_logs,
        service_name=app_settings.service_name,
    )

    application = FastAPI(
        title=build.application,
        version=build.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        lifespan=lifespan,
    )

    application.add_middleware(RequestContextMiddleware)
    register_error_handlers(application)

    routes = (*build_api_routes(build), *build_health_routes(readiness_checks))
    application.include_router(create_router(routes))

    return application


app = create_app()
