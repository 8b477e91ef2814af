# tests/conftest.py
"""
Global test bootstrap
- Points the app at an in-memory SQLite database (never a real PostgreSQL)
- Mounts a mock Redis client into filmoteka.core.redis_client
- Exposes a redis_client fixture, cleared between tests
"""

from __future__ import annotations

import os

import pytest

# ──────────────────────────────────────────────────────────────────────────────
# 🌱 Test env
#   NOTE: These are set BEFORE importing the app/fixtures so settings pick them up.
# ──────────────────────────────────────────────────────────────────────────────
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("LOG_TO_FILE", "0")

# ──────────────────────────────────────────────────────────────────────────────
# 🧪 Install mock Redis globally before any tests run
# ──────────────────────────────────────────────────────────────────────────────
from filmoteka.core.redis_client import redis_wrapper
from tests.fixtures.mocks.redis import MockRedisClient

redis_wrapper._client = MockRedisClient()  # make the app use the mock client

# ──────────────────────────────────────────────────────────────────────────────
# 📦 Pull in the rest of the fixtures (db, app, users)
# ──────────────────────────────────────────────────────────────────────────────
from tests.fixtures.db import *     # noqa: F401,F403,E402
from tests.fixtures.app import *    # noqa: F401,F403,E402
from tests.fixtures.users import *  # noqa: F401,F403,E402


# ──────────────────────────────────────────────────────────────────────────────
# 🔌 Redis fixture (function-scoped), cleared before and after each test
# ──────────────────────────────────────────────────────────────────────────────
@pytest.fixture()
async def redis_client():
    """
    ✅ Use this when you want to inspect or modify Redis directly in a test.
    """
    client = redis_wrapper.client
    await client.flushall()
    yield client
    await client.flushall()
