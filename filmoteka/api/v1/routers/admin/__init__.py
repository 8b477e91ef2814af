from __future__ import annotations

"""
Admin router package (v1)
=========================

Aggregates the admin film and actor routers behind the auth chain:

    authenticate (session cookie → user id) → authorize (role == admin)

Both guards are package-level dependencies, declared in that order, so no
admin handler runs unless both pass.

Mount with a base path in your app:
    app.include_router(admin.router, prefix="/api/v1/admin")
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from filmoteka.dependencies.auth import authenticate, authorize

from .actors import router as actors_router
from .films import router as films_router


# ─────────────────────────────────────────────────────────────────────────────
# 📋 Common OpenAPI responses (docs-only; behavior unchanged)
# ─────────────────────────────────────────────────────────────────────────────

COMMON_ADMIN_RESPONSES: Dict[int | str, Dict[str, Any]] = {
    status.HTTP_401_UNAUTHORIZED: {"description": "No or expired session"},
    status.HTTP_403_FORBIDDEN: {"description": "Not an admin"},
}


# ─────────────────────────────────────────────────────────────────────────────
# 🧱 Aggregated router
# ─────────────────────────────────────────────────────────────────────────────

router = APIRouter(
    dependencies=[Depends(authenticate), Depends(authorize)],
    responses=COMMON_ADMIN_RESPONSES,
)
router.include_router(films_router)
router.include_router(actors_router)


__all__ = ["router", "films_router", "actors_router", "COMMON_ADMIN_RESPONSES"]
