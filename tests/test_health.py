"""Liveness and readiness probes."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from gke_demo.main import create_app
from gke_demo.routers.health import check_readiness


def test_health_is_exactly_up(client):
    for _ in range(10):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "UP"}


def test_live_matches_health(client):
    resp = client.get("/health/live")
    assert resp.status_code == 200
    assert resp.json() == {"status": "UP"}


def test_ready_without_checks_is_up(client):
    resp = client.get("/health/ready")
    assert resp.status_code == 200
    assert resp.json() == {"status": "UP", "checks": {}}


async def cache_reachable() -> bool:
    return True


async def queue_reachable() -> bool:
    return False


async def broker_reachable() -> bool:
    raise ConnectionError("connection refused")


def test_ready_with_passing_check(test_settings):
    app = create_app(test_settings, readiness_checks=[cache_reachable])
    with TestClient(app) as client:
        resp = client.get("/health/ready")

    assert resp.status_code == 200
    assert resp.json() == {"status": "UP", "checks": {"cache_reachable": "ok"}}


def test_ready_with_failing_checks_is_503(test_settings):
    app = create_app(
        test_settings,
        readiness_checks=[cache_reachable, queue_reachable, broker_reachable],
    )
    with TestClient(app) as client:
        ready = client.get("/health/ready")
        live = client.get("/health")

    assert ready.status_code == 503
    assert ready.json() == {
        "status": "DOWN",
        "checks": {
            "cache_reachable": "ok",
            "queue_reachable": "failing",
            "broker_reachable": "error: connection refused",
        },
    }
    # Liveness never runs readiness checks
    assert live.status_code == 200
    assert live.json() == {"status": "UP"}


@pytest.mark.anyio
async def test_check_readiness_folds_results():
    result = await check_readiness([cache_reachable, queue_reachable])
    assert result.status == "DOWN"
    assert result.checks == {"cache_reachable": "ok", "queue_reachable": "failing"}

    assert (await check_readiness([])).status == "UP"


def make_check(result: bool):
    async def check() -> bool:
        return result

    return check


def test_ready_with_same_named_checks_reports_every_result(test_settings):
    app = create_app(
        test_settings,
        readiness_checks=[make_check(False), make_check(True), make_check(True)],
    )
    with TestClient(app) as client:
        resp = client.get("/health/ready")

    assert resp.status_code == 503
    assert resp.json() == {
        "status": "DOWN",
        "checks": {"check": "failing", "check#2": "ok", "check#3": "ok"},
    }


@pytest.mark.anyio
async def test_check_readiness_down_when_failing_name_repeats_last():
    result = await check_readiness([make_check(True), make_check(False)])
    assert result.status == "DOWN"
    assert result.checks == {"check": "ok", "check#2": "failing"}
