"""Shared test configuration."""

from __future__ import annotations

import os

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

# Console logs and no .env surprises while testing
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "INFO")

from gke_demo.core.config import Settings  # noqa: E402
from gke_demo.main import create_app  # noqa: E402


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, environment="test", service_name="gke_demo_test")


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    return create_app(test_settings)


@pytest.fixture
def client(app: FastAPI):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
