from __future__ import annotations

"""
👤 Filmoteka · User
===================

Registered account. Users are created by `/register` and never deleted.

• `username` is unique (case-sensitive, `^[a-zA-Z0-9_]+$` enforced at the edge).
• `password` holds a salted Passlib hash, never plaintext.
• `role` is `default` or `admin`; admins are promoted out of band.
"""

from sqlalchemy import CheckConstraint, Column, String, text

from filmoteka.db.base_class import Base, PKMixin
from filmoteka.schemas.enums import UserRole


class User(PKMixin, Base):
    """Account row used by login/register and by the admin role check."""

    __tablename__ = "users"

    username = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    role = Column(
        String(16),
        nullable=False,
        default=UserRole.DEFAULT.value,
        server_default=text(f"'{UserRole.DEFAULT.value}'"),
    )

    __table_args__ = (
        CheckConstraint("role IN ('default', 'admin')", name="role_known"),
    )
