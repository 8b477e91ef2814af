"""
Filmoteka · Response cache hardening
====================================

`set_sensitive_cache(response)` marks responses that carry session tokens or
admin data as non-cacheable (`no-store`), or, with `seconds > 0`, as a short
private cache varying on `Cookie`.
"""

from __future__ import annotations

from starlette.responses import Response


def set_sensitive_cache(response: Response, *, seconds: int = 0) -> None:
    """Apply cache headers to `response` (idempotent)."""
    if seconds <= 0:
        response.headers.setdefault("Cache-Control", "no-store")
        response.headers.setdefault("Pragma", "no-cache")
        response.headers.setdefault("Expires", "0")
        return

    response.headers.setdefault("Cache-Control", f"private, max-age={seconds}")
    vary = response.headers.get("Vary")
    existing = {v.strip() for v in vary.split(",") if v.strip()} if vary else set()
    response.headers["Vary"] = ", ".join(sorted(existing | {"Cookie"}))


__all__ = ["set_sensitive_cache"]
