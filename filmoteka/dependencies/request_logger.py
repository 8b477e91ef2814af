from __future__ import annotations

"""Request-scoped logger accessor."""

from fastapi import Request

from filmoteka.core.exceptions import InternalErrorException


def get_request_logger(request: Request):
    """Return the logger bound by `RequestInitMiddleware`.

    Its absence means the app was wired without the init middleware; the
    request fails with 500 rather than logging without a request id.
    """
    log = getattr(request.state, "logger", None)
    if log is None:
        raise InternalErrorException()
    return log


__all__ = ["get_request_logger"]
