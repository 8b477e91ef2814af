from __future__ import annotations

"""
Central enum definitions used across Filmoteka.

Design notes
------------
• All enums subclass `str, PyEnum` for JSON-friendly serialization.
• VALUE STRINGS are stable once deployed (stored in the DB as-is).
"""

from enum import Enum as PyEnum


# ──────────────────────────────────────────────────────────────
# Auth
# ──────────────────────────────────────────────────────────────
class UserRole(str, PyEnum):
    """Role stored on the user row; only `admin` unlocks admin routes."""
    DEFAULT = "default"
    ADMIN = "admin"


# ──────────────────────────────────────────────────────────────
# Catalog
# ──────────────────────────────────────────────────────────────
class Gender(str, PyEnum):
    MALE = "male"
    FEMALE = "female"


class FilmSort(str, PyEnum):
    """Sortable film columns; listing is always descending."""
    NAME = "name"
    RATING = "rating"
    DATE_OF_RELEASE = "date_of_release"


__all__ = ["UserRole", "Gender", "FilmSort"]
