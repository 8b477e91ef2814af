from __future__ import annotations

import uuid

import pytest
from fastapi import Depends, FastAPI, Request
from httpx import ASGITransport, AsyncClient

from filmoteka.core.exception_handlers import global_exception_handler, http_exception_handler
from filmoteka.core.exceptions import AppException
from filmoteka.dependencies.request_logger import get_request_logger
from filmoteka.middleware.access_log import AccessLogMiddleware
from filmoteka.middleware.request_init import HEADER_NAME, RequestInitMiddleware


def _mk_app(*, with_init: bool = True) -> FastAPI:
    app = FastAPI()
    app.add_middleware(AccessLogMiddleware)
    if with_init:
        app.add_middleware(RequestInitMiddleware)
    app.add_exception_handler(AppException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, global_exception_handler)  # type: ignore[arg-type]

    @app.get("/probe")
    async def probe(request: Request, log=Depends(get_request_logger)):
        log.info("probe hit")
        return {"request_id": request.state.request_id, "has_logger": log is not None}

    @app.get("/boom")
    async def boom():
        raise ValueError("kaboom")

    return app


def _client(app: FastAPI) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app, raise_app_exceptions=False), base_url="http://test")


@pytest.mark.anyio
async def test_request_id_header_matches_state():
    async with _client(_mk_app()) as client:
        resp = await client.get("/probe")

    assert resp.status_code == 200
    body = resp.json()
    assert body["has_logger"] is True
    assert resp.headers[HEADER_NAME] == body["request_id"]
    assert str(uuid.UUID(body["request_id"])) == body["request_id"]


@pytest.mark.anyio
async def test_client_supplied_request_id_is_replaced():
    async with _client(_mk_app()) as client:
        resp = await client.get("/probe", headers={HEADER_NAME: "spoofed"})

    assert resp.headers[HEADER_NAME] != "spoofed"
    assert resp.json()["request_id"] == resp.headers[HEADER_NAME]


@pytest.mark.anyio
async def test_each_request_gets_its_own_id():
    async with _client(_mk_app()) as client:
        ids = {(await client.get("/probe")).headers[HEADER_NAME] for _ in range(5)}
    assert len(ids) == 5


@pytest.mark.anyio
async def test_logger_setup_failure_short_circuits(monkeypatch):
    def _broken(request_id: str):
        raise RuntimeError("sink unavailable")

    monkeypatch.setattr(RequestInitMiddleware, "make_logger", staticmethod(_broken))

    async with _client(_mk_app()) as client:
        resp = await client.get("/probe")

    assert resp.status_code == 500
    assert resp.json()["error"] == "internal error"


@pytest.mark.anyio
async def test_missing_logger_in_state_is_internal_error():
    async with _client(_mk_app(with_init=False)) as client:
        resp = await client.get("/probe")

    assert resp.status_code == 500
    assert resp.json()["error"] == "internal error"


@pytest.mark.anyio
async def test_unhandled_error_renders_json_500():
    async with _client(_mk_app()) as client:
        resp = await client.get("/boom")

    assert resp.status_code == 500
    assert resp.json()["error"] == "internal error"
    assert "kaboom" not in resp.text
