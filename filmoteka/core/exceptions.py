# filmoteka/core/exceptions.py
from __future__ import annotations

"""
Filmoteka · HTTP Application Exceptions
=======================================
A small, consistent layer on top of FastAPI/Starlette's `HTTPException` that
lets routers attach structured metadata and integrate with the JSON error
shape rendered by `filmoteka.core.exception_handlers`.

Key ideas
---------
- One base `AppException` carrying `message`, `code`, `request_id`, `details`.
- Typed subclasses per status so routers read like the status table.
- `to_problem()` renders the canonical body: `{"error": <message>, ...}`.

Usage
-----
    raise NotFoundException("film not found")

    raise AppException(status_code=422, message="user already exists", details={"field": "username"})
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, status

__all__ = [
    "AppException",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "UnprocessableException",
    "InternalErrorException",
]


# ──────────────────────────────────────────────────────────────
# 📦 Core: AppException
# ──────────────────────────────────────────────────────────────
class AppException(HTTPException):
    """Base application-level exception with optional metadata.

    Attributes
    -----------
    status_code : int
        HTTP status code (400/401/403/404/422/500).
    message : str
        Human-readable error message (serialized as `error`, also kept as `detail`).
    code : int
        Optional internal/typed error code. Defaults to `status_code`.
    request_id : str | None
        Request correlation id; handlers fill it from `request.state` when absent.
    details : Any
        Machine-readable details (e.g. validation errors).
    headers : dict | None
        Optional response headers.
    """

    def __init__(
        self,
        *,
        status_code: int,
        message: str,
        code: Optional[int] = None,
        request_id: Optional[str] = None,
        details: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(status_code=status_code, detail=message, headers=headers)
        self.code: int = int(code or status_code)
        self.message: str = message
        self.request_id: Optional[str] = request_id
        self.details: Optional[Any] = details

    # ── [Helper] Canonical body used by handlers ───────────────────────────
    def to_problem(self, *, fallback_request_id: Optional[str] = None) -> Dict[str, Any]:
        """Return the JSON error body."""
        body: Dict[str, Any] = {
            "error": self.message,
            "code": self.code,
            "request_id": self.request_id or fallback_request_id or "N/A",
        }
        if self.details is not None:
            body["details"] = self.details
        return body


# ──────────────────────────────────────────────────────────────
# 🧭 Typed status exceptions
# ──────────────────────────────────────────────────────────────
class BadRequestException(AppException):
    def __init__(self, message: str = "bad request", **kwargs: Any) -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, message=message, **kwargs)


class UnauthorizedException(AppException):
    """Missing, unknown or expired session (401)."""

    def __init__(self, message: str = "unauthorized", **kwargs: Any) -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, message=message, **kwargs)


class ForbiddenException(AppException):
    """Authenticated, but the role does not allow the operation (403)."""

    def __init__(self, message: str = "forbidden", **kwargs: Any) -> None:
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, message=message, **kwargs)


class NotFoundException(AppException):
    def __init__(self, message: str = "not found", **kwargs: Any) -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, message=message, **kwargs)


class UnprocessableException(AppException):
    def __init__(self, message: str = "unprocessable entity", **kwargs: Any) -> None:
        super().__init__(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, message=message, **kwargs)


class InternalErrorException(AppException):
    """Store or wiring failure; the message stays vague on purpose."""

    def __init__(self, message: str = "internal error", **kwargs: Any) -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, message=message, **kwargs)
