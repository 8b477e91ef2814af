from __future__ import annotations

import pytest
from httpx import AsyncClient

from filmoteka.core.config import settings
from filmoteka.core.redis_client import redis_wrapper


@pytest.mark.anyio
async def test_healthz(async_client: AsyncClient):
    resp = await async_client.get("/healthz")

    assert resp.status_code == 200
    assert resp.json() == {"ok": True}
    assert resp.headers.get("X-Request-ID")


@pytest.mark.anyio
async def test_readyz_reports_stores(async_client: AsyncClient):
    resp = await async_client.get("/readyz")

    assert resp.status_code == 200
    assert resp.json() == {"ready": True, "checks": {"db": True, "redis": True}}


@pytest.mark.anyio
async def test_readyz_503_without_redis(async_client: AsyncClient, monkeypatch):
    async def _down() -> bool:
        return False

    monkeypatch.setattr(redis_wrapper, "is_connected", _down)

    resp = await async_client.get("/readyz")

    assert resp.status_code == 503
    assert resp.json()["checks"]["redis"] is False


@pytest.mark.anyio
async def test_root(async_client: AsyncClient):
    resp = await async_client.get("/")

    assert resp.json()["name"] == settings.PROJECT_NAME


@pytest.mark.anyio
async def test_unknown_route_is_json_404(async_client: AsyncClient):
    resp = await async_client.get(f"{settings.API_V1_STR}/nope")

    assert resp.status_code == 404
    assert "error" in resp.json()
