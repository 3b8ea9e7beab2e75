"""Response bodies.

Every field is a plain string; one instance is built per request.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

HealthStatus = Literal["UP", "DOWN"]


class WelcomeResponse(BaseModel):
    message: str
    version: str
    timestamp: str = Field(description="ISO-8601 wall-clock time of the request")
    status: str


class HealthResponse(BaseModel):
    status: HealthStatus


class ReadinessResponse(BaseModel):
    status: HealthStatus
    checks: dict[str, str] = Field(default_factory=dict)


class InfoResponse(BaseModel):
    application: str
    version: str
    runtime_version: str
    framework_version: str
