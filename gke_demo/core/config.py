"""Environment-based configuration and build-time constants.

Runtime settings are loaded from environment variables and .env files.
Version strings are not settings: they are fixed by the build and collected
in :class:`BuildInfo`.
"""

from __future__ import annotations

from dataclasses import dataclass

import fastapi
from pydantic_settings import BaseSettings, SettingsConfigDict

from gke_demo import __version__

APPLICATION_NAME = "Python GKE Demo"
WELCOME_MESSAGE = "Hello from Python FastAPI on GKE!"


class Settings(BaseSettings):
    """Settings for the GKE demo service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── General ───────────────────────────────
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    service_name: str = "gke_demo"

    # ── Server ────────────────────────────────
    service_host: str = "0.0.0.0"
    service_port: int = 8080

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def json_logs(self) -> bool:
        return self.is_production


@dataclass(frozen=True)
class BuildInfo:
    """Constants reported by the service, fixed for the life of the process."""

    application: str
    version: str
    framework_version: str
    message: str


BUILD_INFO = BuildInfo(
    application=APPLICATION_NAME,
    version=__version__,
    framework_version=fastapi.__version__,
    message=WELCOME_MESSAGE,
)


settings = Settings()
