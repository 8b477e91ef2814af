# filmoteka/main.py
from __future__ import annotations

"""
# Filmoteka API · Application Entrypoint (FastAPI)

ASGI application factory and lifecycle for the Filmoteka film catalog.

## Request chain
1) `RequestInitMiddleware`: request id + request-scoped logger (outermost)
2) `AccessLogMiddleware`: one access line per request
3) per-route guards: `authenticate` → `authorize` (admin router only)

## Probes
- `/healthz`: liveness (process up).
- `/readyz`: readiness (DB `SELECT 1` + Redis `PING`).
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator
import logging
import os

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

# -- Logging bootstrap (Loguru + stdlib intercept) ----------------------------
from filmoteka.core import logger as _logsetup  # noqa: F401

from filmoteka.api.v1.routers import router as api_v1_router
from filmoteka.core.config import settings
from filmoteka.core.exception_handlers import (
    global_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from filmoteka.core.redis_client import redis_wrapper
from filmoteka.db.session import async_engine, db_healthcheck
from filmoteka.middleware.access_log import AccessLogMiddleware
from filmoteka.middleware.request_init import RequestInitMiddleware

logger = logging.getLogger("filmoteka")


# ─────────────────────────────────────────────────────────────────────────────
# 🔄 Lifespan: startup & shutdown
# ─────────────────────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifecycle manager.

    Startup:
        - Best-effort connect to Redis (a failure is logged; session routes
          use a lazily built client and answer 500 while Redis is down).

    Shutdown:
        - Dispose the DB engine and close Redis.
    """
    logger.info("Filmoteka API starting up")

    try:
        await redis_wrapper.connect()
    except RuntimeError:
        logger.exception("Redis connect failed (continuing in degraded mode)")

    try:
        yield
    finally:
        await async_engine.dispose()
        logger.info("Database engine disposed")
        await redis_wrapper.close()
        logger.info("Filmoteka API shutting down")


# ─────────────────────────────────────────────────────────────────────────────
# 🏗️ App factory
# ─────────────────────────────────────────────────────────────────────────────
def create_app() -> FastAPI:
    """
    Build and configure the FastAPI app instance.

    Returns:
        FastAPI: application with middleware, exception handlers, the v1
        router and health/readiness endpoints.
    """
    enable_docs = settings.ENABLE_DOCS
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        docs_url="/docs" if enable_docs else None,
        redoc_url="/redoc" if enable_docs else None,
        openapi_url="/openapi.json" if enable_docs else None,
        lifespan=lifespan,
    )

    # ── Middlewares (last added runs first) ─────────────────────────────────
    app.add_middleware(AccessLogMiddleware)    # 2) access log
    app.add_middleware(RequestInitMiddleware)  # 1) request id + logger

    # ── Exception handlers ──────────────────────────────────────────────────
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(HTTPException, http_exception_handler)           # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, global_exception_handler)             # type: ignore[arg-type]

    # ── Routers (versioned API) ─────────────────────────────────────────────
    app.include_router(api_v1_router, prefix=settings.API_V1_STR)

    # ── Meta endpoints ──────────────────────────────────────────────────────
    @app.get("/healthz", tags=["meta"])
    async def healthz() -> dict[str, bool]:
        """Liveness probe: `{"ok": true}` while the process is responsive."""
        return {"ok": True}

    @app.get("/readyz", tags=["meta"])
    async def readyz() -> JSONResponse:
        """
        Readiness probe.

        Returns:
            200 with per-dependency booleans when both stores answer, else 503.
        """
        db_ok = await db_healthcheck()
        redis_ok = await redis_wrapper.is_connected()
        ready = db_ok and redis_ok
        return JSONResponse(
            {"ready": ready, "checks": {"db": db_ok, "redis": redis_ok}},
            status_code=200 if ready else 503,
        )

    @app.get("/", include_in_schema=False)
    async def root() -> JSONResponse:
        """Minimal root that points to docs (when enabled)."""
        return JSONResponse(
            {"name": settings.PROJECT_NAME, "docs": app.docs_url or "", "version": settings.VERSION}
        )

    return app


# ─────────────────────────────────────────────────────────────────────────────
# 🚀 Module-level ASGI app for Uvicorn
# ─────────────────────────────────────────────────────────────────────────────
app = create_app()
__all__ = ["create_app", "app", "lifespan"]


# Local dev runner (prefer: `uvicorn filmoteka.main:app --reload`)
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "filmoteka.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("RELOAD", "1") == "1",
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )
