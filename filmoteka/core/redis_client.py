# filmoteka/core/redis_client.py
from __future__ import annotations

"""
Filmoteka · Redis Client (Async)
================================
Central, single source of truth for Redis access in the app. Sessions are the
only Redis-backed state, so this module stays a connection manager: the
session repository issues the commands itself.

What this provides
------------------
• Startup connect (standalone + cluster) with exponential backoff and jitter
• Pooled async client with health checks; commands are never retried
• `get_redis` FastAPI dependency (no ping, no reconnect loop per request)

Public API (imported as `redis_wrapper`)
----------------------------------------
- await redis_wrapper.connect() / await redis_wrapper.close() / await redis_wrapper.is_connected()
- redis_wrapper.client / redis_wrapper.ensure_client()
"""

import asyncio
import logging
import os
import random
from typing import Any, Optional, Protocol
from urllib.parse import urlparse

import redis.asyncio as redis
from redis.asyncio.cluster import RedisCluster
from redis.asyncio.retry import Retry
from redis.backoff import NoBackoff
from redis.exceptions import RedisError

from filmoteka.core.config import settings

logger = logging.getLogger("redis")

# ─────────────────────────────────────────────────────────────────────────────
# Tunables (env-aware sensible defaults)
# ─────────────────────────────────────────────────────────────────────────────
MAX_RETRIES = int(os.getenv("REDIS_CONNECT_MAX_RETRIES", "5"))
BASE_DELAY = float(os.getenv("REDIS_CONNECT_BASE_DELAY", "0.3"))  # seconds
HEALTH_CHECK_INTERVAL = int(os.getenv("REDIS_HEALTH_CHECK_INTERVAL", "30"))  # seconds
SOCKET_TIMEOUT = float(os.getenv("REDIS_SOCKET_TIMEOUT", "3"))
SOCKET_CONNECT_TIMEOUT = float(os.getenv("REDIS_SOCKET_CONNECT_TIMEOUT", "3"))
POOL_MAX_CONNECTIONS = int(os.getenv("REDIS_POOL_MAX_CONNECTIONS", "64"))
CLIENT_NAME = os.getenv("REDIS_CLIENT_NAME", "filmoteka-api")


# ─────────────────────────────────────────────────────────────────────────────
# Minimal protocol both redis.Redis and cluster clients satisfy (typing only)
# ─────────────────────────────────────────────────────────────────────────────
class RedisProto(Protocol):
    async def ping(self) -> Any: ...
    async def set(self, name: str, value: Any, *, ex: Optional[int] = None) -> Any: ...
    async def get(self, name: str) -> Any: ...
    async def exists(self, *names: Any) -> Any: ...
    async def delete(self, *names: Any) -> Any: ...
    async def close(self) -> Any: ...


# ─────────────────────────────────────────────────────────────────────────────
# Client
# ─────────────────────────────────────────────────────────────────────────────
class RedisClient:
    """
    Singleton Redis/RedisCluster connection manager (asyncio).

    Cluster mode is selected by a `redis+cluster://` or `rediss+cluster://` URL.
    """

    def __init__(self, redis_url: str):
        self.redis_url = redis_url
        self._client: Optional[RedisProto] = None
        self._is_cluster: bool = self._detect_cluster(redis_url)

    # ── lifecycle ────────────────────────────────────────────────────────────
    async def connect(self) -> None:
        """
        Establish a connection with retries.

        Steps
        -----
        - **[Step 1]** Reuse a healthy client when possible.
        - **[Step 2]** Attempt connection with backoff and jitter.
        """
        # ── [Step 1] Reuse an existing healthy client ───────────────────────
        if self._client:
            try:
                await self._client.ping()
                logger.debug("Redis already connected.")
                return
            except RedisError:
                self._client = None  # stale client → reconnect

        attempt = 0
        last_err: Optional[Exception] = None

        # ── [Step 2] Retry with backoff ─────────────────────────────────────
        while attempt < MAX_RETRIES:
            attempt += 1
            try:
                self._client = self._build_client()
                await self._client.ping()
                logger.info("Connected to Redis%s", " (cluster)" if self._is_cluster else "")
                return
            except (RedisError, OSError) as e:
                last_err = e
                delay = self._backoff(attempt)
                logger.warning(
                    "Redis connect attempt %s/%s failed: %s (retrying in %.2fs)",
                    attempt, MAX_RETRIES, repr(e), delay,
                )
                await asyncio.sleep(delay)

        self._client = None
        logger.error("Redis connection failed after %s retries.", MAX_RETRIES)
        raise RuntimeError("Redis connection failed") from last_err

    async def close(self) -> None:
        """Gracefully close the client and its pool."""
        if not self._client:
            return
        try:
            await self._client.close()
            logger.info("Redis connection closed.")
        except RedisError as e:
            logger.warning("Error closing Redis connection: %s", e)
        finally:
            self._client = None

    async def is_connected(self) -> bool:
        """Return True if `PING` succeeds (healthy connection)."""
        if not self._client:
            return False
        try:
            return bool(await self._client.ping())
        except RedisError:
            return False

    @property
    def client(self) -> RedisProto:
        """Low-level client; ensure `connect()` was called at startup."""
        if not self._client:
            raise RuntimeError("Redis client not initialized. Call connect() first.")
        return self._client

    def ensure_client(self) -> RedisProto:
        """
        Return the client, building a lazy one if startup never connected.

        No `PING` and no backoff here: the pool opens sockets on first command,
        so an unreachable server fails that command once with a `RedisError`.
        """
        if self._client is None:
            logger.warning("Redis client missing; building one without connect()")
            self._client = self._build_client()
        return self._client

    # ── internals ────────────────────────────────────────────────────────────
    def _build_client(self) -> RedisProto:
        """Instantiate Redis or RedisCluster client with pool options from URL."""
        url = self.redis_url.strip()
        client_kwargs = dict(
            decode_responses=True,
            health_check_interval=HEALTH_CHECK_INTERVAL,
            socket_keepalive=True,
            socket_timeout=SOCKET_TIMEOUT,
            socket_connect_timeout=SOCKET_CONNECT_TIMEOUT,
            retry=Retry(NoBackoff(), 0),
            max_connections=POOL_MAX_CONNECTIONS,
            client_name=CLIENT_NAME,
        )
        if self._is_cluster:
            return RedisCluster.from_url(url.replace("+cluster", ""), **client_kwargs)  # type: ignore[return-value]
        return redis.Redis.from_url(url, **client_kwargs)

    @staticmethod
    def _detect_cluster(url: str) -> bool:
        scheme = urlparse(url).scheme
        return scheme in ("redis+cluster", "rediss+cluster")

    @staticmethod
    def _backoff(attempt: int) -> float:
        # Exponential backoff with jitter (cap at 3s)
        return min(3.0, BASE_DELAY * (2 ** (attempt - 1))) + random.uniform(0, 0.25)


# ─────────────────────────────────────────────────────────────────────────────
# Singleton instance + FastAPI dependency
# ─────────────────────────────────────────────────────────────────────────────
redis_wrapper = RedisClient(settings.REDIS_URL)


async def get_redis() -> RedisProto:
    """
    FastAPI dependency that returns the active client.

    Startup (`filmoteka.main.lifespan`) connects with backoff. Requests never
    reconnect: a dead server surfaces as a `RedisError` from the command itself.
    """
    return redis_wrapper.ensure_client()


__all__ = ["RedisClient", "RedisProto", "redis_wrapper", "get_redis"]
