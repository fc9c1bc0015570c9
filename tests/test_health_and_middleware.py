"""
Campus Records API - Health & Middleware Tests
===============================================

What we test:
    ✅ /health reports healthy without a token, 503 when the database is down
    ✅ every response carries X-Request-ID; a client-supplied one is echoed
    ✅ error payloads carry the same request_id
    ✅ access log lines carry the caller role resolved by the guard
"""

import logging
from unittest.mock import MagicMock

import pytest

from app.routes import health as health_route


@pytest.mark.asyncio
async def test_health_ok(test_client):
    response = await test_client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"
    assert body["version"]


@pytest.mark.asyncio
async def test_health_database_down(test_client, monkeypatch):
    broken = MagicMock()
    broken.connect.side_effect = OSError("connection refused")
    monkeypatch.setattr(health_route, "engine", broken)

    response = await test_client.get("/health")

    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"
    assert response.json()["database"] == "disconnected"


@pytest.mark.asyncio
async def test_request_id_generated(test_client, user_headers):
    response = await test_client.get("/api/articles/all", headers=user_headers)

    assert len(response.headers["X-Request-ID"]) == 8


@pytest.mark.asyncio
async def test_request_id_echoed_in_error_body(test_client, user_headers):
    response = await test_client.get(
        "/api/articles?id=42",
        headers={**user_headers, "X-Request-ID": "trace-42"},
    )

    assert response.status_code == 404
    assert response.headers["X-Request-ID"] == "trace-42"
    assert response.json()["request_id"] == "trace-42"


@pytest.mark.asyncio
async def test_access_log_records_role(test_client, user_headers, caplog):
    caplog.set_level(logging.INFO, logger="campus_records.access")

    await test_client.get("/api/articles/all", headers=user_headers)
    await test_client.delete("/api/articles?id=1", headers=user_headers)

    records = [r for r in caplog.records if r.name == "campus_records.access"]
    assert [r.levelno for r in records] == [logging.INFO, logging.WARNING]
    assert records[0].role == "USER"
    assert "role=USER" in records[1].getMessage()
    assert records[1].status == 403
