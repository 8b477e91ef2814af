"""
Filmoteka · Login, Registration & Logout
========================================

Endpoints
---------
- POST /register : Create a `default`-role account and log it in
- POST /login    : Exchange username/password for a session
- POST /logout   : Revoke the current session (requires a valid session cookie)

Session contract
----------------
- Login and register answer `{"session_id": "<token>"}` and also set the
  `session_id` cookie (HttpOnly, 24h max-age).
- Logout answers `{"result": "success"}` and clears the cookie; a session that
  vanished between authentication and revocation is a 404.

Security & Ops Practices
------------------------
- Unknown username and wrong password share one 401 message.
- `Cache-Control: no-store` on every response that carries a token.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from filmoteka.core.config import settings
from filmoteka.core.exceptions import (
    InternalErrorException,
    NotFoundException,
    UnauthorizedException,
    UnprocessableException,
)
from filmoteka.dependencies.auth import authenticate
from filmoteka.dependencies.request_logger import get_request_logger
from filmoteka.dependencies.services import get_session_service, get_user_service
from filmoteka.repositories.sessions import Session
from filmoteka.schemas.user import CredentialsIn, ResultOut, SessionOut
from filmoteka.security_headers import set_sensitive_cache
from filmoteka.services.errors import BadCredentials, StoreUnavailable, UserAlreadyExists
from filmoteka.services.session_service import SessionService
from filmoteka.services.user_service import UserService

router = APIRouter(tags=["Users"])


# ─────────────────────────────────────────────────────────────────────────────
# 🧩 Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_TTL_SECONDS,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite=settings.SESSION_COOKIE_SAMESITE,
        path="/",
    )


async def _open_session(sessions: SessionService, user_id: int, response: Response) -> SessionOut:
    try:
        token = await sessions.create_session(user_id)
    except StoreUnavailable:
        raise InternalErrorException()
    _set_session_cookie(response, token)
    set_sensitive_cache(response)
    return SessionOut(session_id=token)


# ─────────────────────────────────────────────────────────────────────────────
# 🆕 Register
# ─────────────────────────────────────────────────────────────────────────────
@router.post("/register", response_model=SessionOut, summary="Register and log in")
async def register(
    payload: CredentialsIn,
    response: Response,
    users: UserService = Depends(get_user_service),
    sessions: SessionService = Depends(get_session_service),
    log=Depends(get_request_logger),
) -> SessionOut:
    """
    Steps
    -----
    1) Body already validated (username pattern, password 8..255).
    2) Create the user; a taken username is a 422.
    3) Open a session for the new user and return its token.
    """
    # ── [Step 2] Create user ────────────────────────────────────────────────
    try:
        user = await users.register(payload.username, payload.password)
    except UserAlreadyExists as e:
        raise UnprocessableException(e.message)

    log.info("user {} registered", user.id)

    # ── [Step 3] Session ────────────────────────────────────────────────────
    return await _open_session(sessions, user.id, response)


# ─────────────────────────────────────────────────────────────────────────────
# 🔑 Login
# ─────────────────────────────────────────────────────────────────────────────
@router.post("/login", response_model=SessionOut, summary="Log in")
async def login(
    payload: CredentialsIn,
    response: Response,
    users: UserService = Depends(get_user_service),
    sessions: SessionService = Depends(get_session_service),
) -> SessionOut:
    try:
        user = await users.login(payload.username, payload.password)
    except BadCredentials as e:
        raise UnauthorizedException(e.message)
    return await _open_session(sessions, user.id, response)


# ─────────────────────────────────────────────────────────────────────────────
# 🚪 Logout
# ─────────────────────────────────────────────────────────────────────────────
@router.post("/logout", response_model=ResultOut, summary="Log out")
async def logout(
    response: Response,
    session: Session = Depends(authenticate),
    sessions: SessionService = Depends(get_session_service),
) -> ResultOut:
    try:
        deleted = await sessions.delete_session(session.id)
    except StoreUnavailable:
        raise InternalErrorException()
    if not deleted:
        raise NotFoundException("no session to delete")

    response.delete_cookie(settings.SESSION_COOKIE_NAME, path="/")
    set_sensitive_cache(response)
    return ResultOut()


__all__ = ["router"]
