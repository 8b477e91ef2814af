# filmoteka/db/base.py
"""
Filmoteka · SQLAlchemy Base registry
====================================

Import all ORM models so their tables are registered on `Base.metadata`.
Used by Alembic autogeneration and by tests that call `create_all`.

Keep this file import-only; no runtime logic.
"""

from filmoteka.db.base_class import Base

# ───────────────────────────────────────────────────────────────
# Accounts
# ───────────────────────────────────────────────────────────────
from filmoteka.db.models.user import User

# ───────────────────────────────────────────────────────────────
# Catalog
# ───────────────────────────────────────────────────────────────
from filmoteka.db.models.actor import Actor
from filmoteka.db.models.film import Film
from filmoteka.db.models.film_actor import FilmActor

__all__ = [
    "Base",
    "User",
    "Actor",
    "Film",
    "FilmActor",
]
