from __future__ import annotations

"""
Session service
===============

Issues, resolves and revokes login sessions.

Lifecycle
---------
ABSENT --create--> ACTIVE --delete / TTL expiry--> ABSENT

- `create_session(user_id)` mints a uuid4 token and stores it with the fixed TTL.
- `get_session(token)` raises `SessionNotFound` for unknown or expired tokens.
- `delete_session(token)` returns whether a session was actually removed.

Any Redis failure is surfaced as `StoreUnavailable`; nothing is retried.
"""

import uuid
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from filmoteka.repositories.sessions import Session, SessionRepositoryProtocol
from filmoteka.services.errors import SessionNotFound, StoreUnavailable

if TYPE_CHECKING:
    from loguru import Logger


class SessionService:
    def __init__(self, repo: SessionRepositoryProtocol, log: "Logger") -> None:
        self.repo = repo
        self.log = log

    async def create_session(self, user_id: int) -> str:
        token = str(uuid.uuid4())
        try:
            await self.repo.create_session(Session(id=token, user_id=user_id))
        except RedisError as e:
            self.log.error("session store failed on create: {}", e)
            raise StoreUnavailable() from e
        return token

    async def get_session(self, token: str) -> Session:
        try:
            session = await self.repo.get_session(token)
        except RedisError as e:
            self.log.error("session store failed on get: {}", e)
            raise StoreUnavailable() from e
        if session is None:
            raise SessionNotFound()
        return session

    async def delete_session(self, token: str) -> bool:
        try:
            return await self.repo.delete_session(token)
        except RedisError as e:
            self.log.error("session store failed on delete: {}", e)
            raise StoreUnavailable() from e


__all__ = ["SessionService"]
