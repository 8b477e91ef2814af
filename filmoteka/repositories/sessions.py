from __future__ import annotations

"""Session repository (Redis).

A session is one key, `session:{id}` → user id, written with `SET ... EX` so
Redis expires it after the configured TTL (24h by default). Lookups of an
expired or unknown id return `None`; `delete_session` reports whether a key
existed. Transport errors (`redis.exceptions.RedisError`) propagate.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from filmoteka.core.config import settings
from filmoteka.core.redis_client import RedisProto

if TYPE_CHECKING:
    from loguru import Logger


@dataclass(frozen=True)
class Session:
    id: str
    user_id: int


class SessionRepositoryProtocol:
    async def create_session(self, session: Session) -> None:
        raise NotImplementedError

    async def get_session(self, session_id: str) -> Optional[Session]:
        raise NotImplementedError

    async def delete_session(self, session_id: str) -> bool:
        raise NotImplementedError


class RedisSessionRepository(SessionRepositoryProtocol):
    def __init__(
        self,
        client: RedisProto,
        log: "Logger",
        *,
        ttl_seconds: Optional[int] = None,
        key_prefix: Optional[str] = None,
    ) -> None:
        self.client = client
        self.log = log
        self.ttl_seconds = ttl_seconds or settings.SESSION_TTL_SECONDS
        self.key_prefix = key_prefix if key_prefix is not None else settings.SESSION_KEY_PREFIX

    def _key(self, session_id: str) -> str:
        return f"{self.key_prefix}{session_id}"

    async def create_session(self, session: Session) -> None:
        await self.client.set(self._key(session.id), str(session.user_id), ex=self.ttl_seconds)

    async def get_session(self, session_id: str) -> Optional[Session]:
        raw = await self.client.get(self._key(session_id))
        if raw is None:
            return None
        if isinstance(raw, (bytes, bytearray)):
            raw = raw.decode("utf-8")
        try:
            user_id = int(raw)
        except ValueError:
            self.log.warning("session {} holds a non-integer user id", session_id)
            return None
        return Session(id=session_id, user_id=user_id)

    async def delete_session(self, session_id: str) -> bool:
        key = self._key(session_id)
        if not await self.client.exists(key):
            return False
        await self.client.delete(key)
        return True


__all__ = ["Session", "SessionRepositoryProtocol", "RedisSessionRepository"]
