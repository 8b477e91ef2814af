from __future__ import annotations

"""
JSON exception handlers.

Registered by `filmoteka.main.create_app`. Every failure leaves the API as a
JSON object with an `error` message and the request id; validation failures
also carry `details`. Internals never reach the client.
"""

from typing import Any, Dict

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger as root_logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from filmoteka.core.exceptions import AppException


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "") or "N/A"


def _request_logger(request: Request):
    return getattr(request.state, "logger", None) or root_logger


def _error(request: Request, status_code: int, message: str, **extra: Any) -> JSONResponse:
    body: Dict[str, Any] = {"error": message, "request_id": _request_id(request)}
    body.update(extra)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:  # type: ignore
    if isinstance(exc, AppException):
        return JSONResponse(
            status_code=exc.status_code,
            content=jsonable_encoder(exc.to_problem(fallback_request_id=_request_id(request))),
            headers=exc.headers,
        )
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    response = _error(request, exc.status_code, detail)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:  # type: ignore
    _request_logger(request).info("request validation failed: {}", exc.errors())
    return _error(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "validation error",
        details=[{k: e.get(k) for k in ("loc", "msg", "type")} for e in exc.errors()],
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:  # type: ignore
    _request_logger(request).opt(exception=exc).error(
        "unhandled error on {} {}", request.method, request.url.path
    )
    return _error(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "internal error")


__all__ = [
    "http_exception_handler",
    "validation_exception_handler",
    "global_exception_handler",
]
