# -*- coding: utf-8 -*-
import pytest


@pytest.mark.asyncio
async def test_health_reports_firestore(async_client, monkeypatch):
    async def _ok(timeout_s: float = 2.0) -> bool:
        return True

    monkeypatch.setattr("qorinti.routes.health_routes.check_firestore_health", _ok)

    resp = await async_client.get("/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["environment"] == "test"
    assert body["firestore"]["reachable"] is True
    assert body["timestamp"].endswith("Z")


@pytest.mark.asyncio
async def test_health_degraded_when_firestore_unreachable(async_client, monkeypatch):
    async def _down(timeout_s: float = 2.0) -> bool:
        return False

    monkeypatch.setattr("qorinti.routes.health_routes.check_firestore_health", _down)

    resp = await async_client.get("/health")
    assert resp.json()["status"] == "degraded"


@pytest.mark.asyncio
async def test_liveness(async_client):
    resp = await async_client.get("/health/live")
    assert resp.json() == {"status": "ok"}
# Fin del archivo tests/routes/test_health_routes.py
