from __future__ import annotations

"""
Auth guards
-----------
The authenticate → authorize links of the request chain, as FastAPI
dependencies. Compose them at route registration, in this order:

    router = APIRouter(dependencies=[Depends(authenticate), Depends(authorize)])

Exports
- authenticate: resolve the `session_id` cookie; sets `request.state.user_id`
  and `request.state.session_id`
- authorize: require the `admin` role for `request.state.user_id`

Outcomes
- no cookie / unknown or expired session → 401
- user row gone → 401
- role other than `admin` → 403
- session or user store failure, or `user_id` missing from state → 500
"""

from fastapi import Depends, Request
from sqlalchemy.exc import SQLAlchemyError

from filmoteka.core.config import settings
from filmoteka.core.exceptions import (
    ForbiddenException,
    InternalErrorException,
    UnauthorizedException,
)
from filmoteka.dependencies.request_logger import get_request_logger
from filmoteka.dependencies.services import get_session_service, get_user_service
from filmoteka.repositories.sessions import Session
from filmoteka.schemas.enums import UserRole
from filmoteka.services.errors import NoUser, SessionNotFound, StoreUnavailable
from filmoteka.services.session_service import SessionService
from filmoteka.services.user_service import UserService


async def authenticate(
    request: Request,
    sessions: SessionService = Depends(get_session_service),
    log=Depends(get_request_logger),
) -> Session:
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        raise UnauthorizedException("no session cookie")

    try:
        session = await sessions.get_session(token)
    except SessionNotFound:
        log.info("unknown or expired session")
        raise UnauthorizedException("no session")
    except StoreUnavailable:
        raise InternalErrorException()

    request.state.user_id = session.user_id
    request.state.session_id = session.id
    return session


async def authorize(
    request: Request,
    users: UserService = Depends(get_user_service),
    log=Depends(get_request_logger),
) -> None:
    user_id = getattr(request.state, "user_id", None)
    if user_id is None:
        log.error("authorize ran without an authenticated user in request state")
        raise InternalErrorException()

    try:
        role = await users.get_user_role(user_id)
    except NoUser:
        raise UnauthorizedException("no user")
    except SQLAlchemyError as e:
        log.error("role lookup failed for user {}: {}", user_id, e)
        raise InternalErrorException() from e

    if role != UserRole.ADMIN.value:
        log.info("user {} with role {!r} denied admin access", user_id, role)
        raise ForbiddenException("permission denied")


__all__ = ["authenticate", "authorize"]
