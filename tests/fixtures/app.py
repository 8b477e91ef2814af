# tests/fixtures/app.py

"""
🧩 App Fixture:
- Builds the full FastAPI app (middleware, handlers, v1 router)
- Injects the test DB session
- Returns an HTTP client fixture for integration tests
"""

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport
from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncSession

from filmoteka.db.session import get_async_db
from filmoteka.main import create_app
from tests.fixtures.db import get_override_get_db


@pytest.fixture()
async def app(db_session: AsyncSession, redis_client) -> FastAPI:
    """
    🧪 Creates an instance of the FastAPI app with test-specific DB session.
    Redis is the global mock installed by conftest.
    """
    app = create_app()
    app.dependency_overrides[get_async_db] = get_override_get_db(db_session)
    return app


@pytest.fixture()
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """
    🌐 Async HTTP client; unhandled errors come back as 500 responses instead
    of being raised into the test.
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
