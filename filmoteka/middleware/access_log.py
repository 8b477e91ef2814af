from __future__ import annotations

"""
Access log middleware (ASGI).

One INFO line per HTTP request: method, remote address, path, status and
elapsed time. Uses the request logger bound by `RequestInitMiddleware`, so
it must be installed inside (after) it.
"""

import time

from loguru import logger as root_logger
from starlette.types import ASGIApp, Message, Receive, Scope, Send


class AccessLogMiddleware:
    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope.get("type") != "http":
            return await self.app(scope, receive, send)

        started = time.perf_counter()
        status_code = 500

        async def _send_wrapper(message: Message) -> None:
            nonlocal status_code
            if message.get("type") == "http.response.start":
                status_code = int(message.get("status", 500))
            await send(message)

        try:
            await self.app(scope, receive, _send_wrapper)
        finally:
            log = scope.get("state", {}).get("logger") or root_logger
            client = scope.get("client")
            remote_addr = f"{client[0]}:{client[1]}" if client else "-"
            log.info(
                "{method} {path} from {remote_addr} -> {status} in {elapsed:.1f}ms",
                method=scope.get("method", "-"),
                path=scope.get("path", "-"),
                remote_addr=remote_addr,
                status=status_code,
                elapsed=(time.perf_counter() - started) * 1000,
            )


__all__ = ["AccessLogMiddleware"]
