"""
🧭 Filmoteka • API v1 Router Aggregator
=======================================

Exports the combined `router` and each sub-router so callers (and tests) can
mount them individually.

Layout
------
- Public catalog:  /films, /film/{id}, /film/search/{text}, /actors, /actor/{id}
- Users:           /register, /login, /logout
- Admin:           /admin/film..., /admin/actor... (session + admin role)

Quick usage
-----------
    from filmoteka.api.v1.routers import router as v1_router
    app.include_router(v1_router, prefix="/api/v1")
"""

from fastapi import APIRouter

from .actors import router as actors_router
from .admin import router as admin_router
from .films import router as films_router
from .users import router as users_router


def build_v1_router() -> APIRouter:
    """Compose the API v1 surface into a single `APIRouter`."""
    r = APIRouter()
    r.include_router(films_router)
    r.include_router(actors_router)
    r.include_router(users_router)
    r.include_router(admin_router, prefix="/admin")
    return r


router = build_v1_router()


__all__ = [
    "router",
    "build_v1_router",
    "films_router",
    "actors_router",
    "users_router",
    "admin_router",
]
