from __future__ import annotations

import pytest
from typing import Awaitable, Callable
from uuid import uuid4

from httpx import AsyncClient
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from filmoteka.core.config import settings
from filmoteka.db.models.user import User
from filmoteka.repositories.sessions import RedisSessionRepository, Session
from filmoteka.schemas.enums import UserRole
from tests.utils.factory import create_user


# ──────────────────────────────────────────────────────────────
# 🧪 Factory: Create Test User
# ──────────────────────────────────────────────────────────────
@pytest.fixture
def create_test_user(db_session: AsyncSession) -> Callable[..., Awaitable[User]]:
    async def _create(**kwargs) -> User:
        return await create_user(session=db_session, **kwargs)

    return _create


# ──────────────────────────────────────────────────────────────
# 🔑 Sign a user in: store a session in (mock) Redis and set the cookie
# ──────────────────────────────────────────────────────────────
@pytest.fixture
def sign_in(async_client: AsyncClient, redis_client) -> Callable[[User], Awaitable[str]]:
    async def _sign_in(user: User) -> str:
        token = str(uuid4())
        repo = RedisSessionRepository(redis_client, logger)
        await repo.create_session(Session(id=token, user_id=user.id))
        async_client.cookies.set(settings.SESSION_COOKIE_NAME, token)
        return token

    return _sign_in


@pytest.fixture
async def admin_client(async_client: AsyncClient, create_test_user, sign_in) -> AsyncClient:
    """HTTP client carrying the session cookie of an `admin` user."""
    admin = await create_test_user(username="admin", role=UserRole.ADMIN)
    await sign_in(admin)
    return async_client
