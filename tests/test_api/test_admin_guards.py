from __future__ import annotations

from datetime import date

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from filmoteka.core.config import settings
from filmoteka.core.redis_client import get_redis
from filmoteka.dependencies.services import get_user_service
from filmoteka.schemas.enums import UserRole
from tests.fixtures.mocks.redis import FailingRedisClient

API = settings.API_V1_STR
ACTOR_BODY = {"name": "Sigourney", "surname": "Weaver", "gender": "female", "birthday": "1949-10-08"}


@pytest.mark.anyio
async def test_no_cookie_is_401(async_client: AsyncClient):
    resp = await async_client.post(f"{API}/admin/actor", json=ACTOR_BODY)

    assert resp.status_code == 401
    assert resp.json()["error"] == "no session cookie"


@pytest.mark.anyio
async def test_unknown_session_is_401(async_client: AsyncClient):
    async_client.cookies.set(settings.SESSION_COOKIE_NAME, "forged-token")

    resp = await async_client.delete(f"{API}/admin/film/1")

    assert resp.status_code == 401
    assert resp.json()["error"] == "no session"


@pytest.mark.anyio
async def test_expired_session_is_401(async_client: AsyncClient, create_test_user, sign_in, redis_client):
    admin = await create_test_user(role=UserRole.ADMIN)
    token = await sign_in(admin)
    redis_client.expire_now(f"session:{token}")

    resp = await async_client.post(f"{API}/admin/actor", json=ACTOR_BODY)

    assert resp.status_code == 401


@pytest.mark.anyio
async def test_default_role_is_403(async_client: AsyncClient, create_test_user, sign_in):
    user = await create_test_user(role=UserRole.DEFAULT)
    await sign_in(user)

    resp = await async_client.post(f"{API}/admin/actor", json=ACTOR_BODY)

    assert resp.status_code == 403
    assert resp.json()["error"] == "permission denied"


@pytest.mark.anyio
async def test_session_of_deleted_user_is_401(async_client: AsyncClient, db_session, create_test_user, sign_in):
    user = await create_test_user(role=UserRole.ADMIN)
    await sign_in(user)
    await db_session.delete(user)
    await db_session.commit()

    resp = await async_client.post(f"{API}/admin/actor", json=ACTOR_BODY)

    assert resp.status_code == 401
    assert resp.json()["error"] == "no user"


@pytest.mark.anyio
async def test_session_store_down_is_500(async_client: AsyncClient, app):
    app.dependency_overrides[get_redis] = lambda: FailingRedisClient()
    async_client.cookies.set(settings.SESSION_COOKIE_NAME, "any-token")

    resp = await async_client.post(f"{API}/admin/actor", json=ACTOR_BODY)

    assert resp.status_code == 500
    assert resp.json()["error"] == "internal error"


@pytest.mark.anyio
async def test_role_lookup_failure_is_500(async_client: AsyncClient, app, create_test_user, sign_in):
    admin = await create_test_user(role=UserRole.ADMIN)
    await sign_in(admin)

    class _BrokenUsers:
        async def get_user_role(self, user_id: int) -> str:
            raise OperationalError("SELECT role", {}, Exception("db down"))

    app.dependency_overrides[get_user_service] = lambda: _BrokenUsers()

    resp = await async_client.post(f"{API}/admin/actor", json=ACTOR_BODY)

    assert resp.status_code == 500


@pytest.mark.anyio
async def test_admin_passes_both_guards(admin_client: AsyncClient):
    resp = await admin_client.post(f"{API}/admin/actor", json=ACTOR_BODY)

    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["id"] > 0
    assert body["birthday"] == date(1949, 10, 8).isoformat()


@pytest.mark.anyio
async def test_guards_run_before_body_handling(async_client: AsyncClient, create_test_user, sign_in):
    user = await create_test_user(role=UserRole.DEFAULT)
    await sign_in(user)

    resp = await async_client.post(
        f"{API}/admin/film",
        json={"name": "X", "description": "Y", "date_of_release": "2000-01-01", "rating": 5, "actor_ids": [999]},
    )

    assert resp.status_code == 403
