from __future__ import annotations

"""
# Filmoteka · Request Init Middleware (ASGI)

First link of the request chain:

- Generates a UUIDv4 request id (client-supplied ids are not trusted).
- Binds a request-scoped **loguru** logger carrying `request_id` and stores
  it in `request.state.logger`; the id itself goes to `request.state.request_id`.
- Adds the `X-Request-ID` response header.
- If the logger cannot be set up, answers 500 `{"error": "internal error"}`
  and the rest of the chain never runs.

Downstream code gets the logger through `filmoteka.dependencies.request_logger.get_request_logger`
and hands it to services and repositories explicitly.

## Usage
    from filmoteka.middleware.request_init import RequestInitMiddleware
    app.add_middleware(RequestInitMiddleware)
"""

import json
import uuid

from loguru import logger
from starlette.types import ASGIApp, Message, Receive, Scope, Send

HEADER_NAME = "X-Request-ID"


class RequestInitMiddleware:
    """Pure ASGI middleware giving every HTTP request an id and a bound logger."""

    def __init__(self, app: ASGIApp, header_name: str = HEADER_NAME) -> None:
        self.app = app
        self.header_name = header_name

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope.get("type") != "http":
            return await self.app(scope, receive, send)

        req_id = str(uuid.uuid4())
        try:
            request_logger = self.make_logger(req_id)
        except Exception:
            logger.exception("[RequestInit] could not create request logger")
            await self._internal_error(send, req_id)
            return

        state = scope.setdefault("state", {})
        state["request_id"] = req_id
        state["logger"] = request_logger

        header = self.header_name.encode("latin-1")

        async def _send_wrapper(message: Message) -> None:
            if message.get("type") == "http.response.start":
                raw = message.setdefault("headers", [])
                message["headers"] = [(k, v) for (k, v) in raw if k.lower() != header.lower()]
                message["headers"].append((header, req_id.encode("latin-1")))
            await send(message)

        with logger.contextualize(request_id=req_id):
            await self.app(scope, receive, _send_wrapper)

    # ── Helpers ─────────────────────────────────────────────────────────────

    @staticmethod
    def make_logger(request_id: str):
        """Return a loguru logger bound to `request_id`."""
        return logger.bind(request_id=request_id)

    async def _internal_error(self, send: Send, req_id: str) -> None:
        body = json.dumps({"error": "internal error", "request_id": req_id}).encode("utf-8")
        await send(
            {
                "type": "http.response.start",
                "status": 500,
                "headers": [
                    (b"content-type", b"application/json"),
                    (b"content-length", str(len(body)).encode("latin-1")),
                    (self.header_name.encode("latin-1"), req_id.encode("latin-1")),
                ],
            }
        )
        await send({"type": "http.response.body", "body": body})


__all__ = ["RequestInitMiddleware", "HEADER_NAME"]
