from __future__ import annotations

"""
Service providers (FastAPI dependencies)
----------------------------------------
Build one service graph per request: repository → service, each handed the
request-scoped logger from `RequestInitMiddleware` and the request's DB
session or the shared Redis client.

Tests replace these with `app.dependency_overrides[...]`.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from filmoteka.core.redis_client import RedisProto, get_redis
from filmoteka.core.security import pwd_hasher
from filmoteka.db.session import get_async_db
from filmoteka.dependencies.request_logger import get_request_logger
from filmoteka.repositories.actors import get_actors_repository
from filmoteka.repositories.films import get_films_repository
from filmoteka.repositories.sessions import RedisSessionRepository
from filmoteka.repositories.users import get_users_repository
from filmoteka.services.actor_service import ActorService
from filmoteka.services.film_service import FilmService
from filmoteka.services.session_service import SessionService
from filmoteka.services.user_service import UserService


async def get_film_service(
    db: AsyncSession = Depends(get_async_db),
    log=Depends(get_request_logger),
) -> FilmService:
    return FilmService(get_films_repository(db, log), log)


async def get_actor_service(
    db: AsyncSession = Depends(get_async_db),
    log=Depends(get_request_logger),
) -> ActorService:
    return ActorService(get_actors_repository(db, log), log)


async def get_user_service(
    db: AsyncSession = Depends(get_async_db),
    log=Depends(get_request_logger),
) -> UserService:
    return UserService(get_users_repository(db, log), pwd_hasher, log)


async def get_session_service(
    client: RedisProto = Depends(get_redis),
    log=Depends(get_request_logger),
) -> SessionService:
    return SessionService(RedisSessionRepository(client, log), log)


__all__ = [
    "get_film_service",
    "get_actor_service",
    "get_user_service",
    "get_session_service",
]
