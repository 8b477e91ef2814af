from __future__ import annotations

"""
Domain errors raised by the service layer.

Routers and auth dependencies translate these into `filmoteka.core.exceptions`
HTTP errors; nothing below the service layer knows about HTTP.

    ServiceError
    ├── NotFound          FilmNotFound, FilmsNotFound, ActorNotFound, SessionNotFound, NoUser
    ├── BadInput          BadFilmAddData, BadFilmUpdateData, UserAlreadyExists, BadSortParam
    ├── BadCredentials
    └── StoreUnavailable  wraps a session-store / transport failure
"""


class ServiceError(Exception):
    """Base class for every domain error."""

    message = "service error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


# ── Not found ───────────────────────────────────────────────
class NotFound(ServiceError):
    message = "not found"


class FilmNotFound(NotFound):
    message = "film not found"


class FilmsNotFound(NotFound):
    message = "films not found"


class ActorNotFound(NotFound):
    message = "actor not found"


class SessionNotFound(NotFound):
    message = "no session"


class NoUser(NotFound):
    message = "no user"


# ── Bad input ───────────────────────────────────────────────
class BadInput(ServiceError):
    message = "bad input"


class BadFilmAddData(BadInput):
    message = "bad add data"


class BadFilmUpdateData(BadInput):
    message = "bad update data"


class UserAlreadyExists(BadInput):
    message = "user already exists"


class BadSortParam(BadInput):
    message = "bad sort param"


# ── Auth / infra ────────────────────────────────────────────
class BadCredentials(ServiceError):
    message = "bad username or password"


class StoreUnavailable(ServiceError):
    message = "store unavailable"


__all__ = [
    "ServiceError",
    "NotFound",
    "FilmNotFound",
    "FilmsNotFound",
    "ActorNotFound",
    "SessionNotFound",
    "NoUser",
    "BadInput",
    "BadFilmAddData",
    "BadFilmUpdateData",
    "UserAlreadyExists",
    "BadSortParam",
    "BadCredentials",
    "StoreUnavailable",
]
