# filmoteka/core/security.py
from __future__ import annotations

"""
Filmoteka · Password hashing
============================
Salted password hashes via Passlib's `CryptContext`. Schemes come from
`settings.PASSWORD_HASH_SCHEMES` (default `pbkdf2_sha256`); hashes made with a
scheme later marked deprecated still verify.

`PasswordHasher` is the object the user service depends on, so tests can swap
in a cheap implementation.
"""

from typing import Optional, Sequence

from passlib.context import CryptContext

from filmoteka.core.config import settings


class PasswordHasher:
    """Thin wrapper over a Passlib context."""

    def __init__(self, schemes: Optional[Sequence[str]] = None) -> None:
        self._context = CryptContext(
            schemes=list(schemes or settings.PASSWORD_HASH_SCHEMES),
            deprecated="auto",
        )

    def hash(self, password: str) -> str:
        """Return a salted hash of `password`."""
        return self._context.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        """Constant-time verify; malformed stored hashes count as a mismatch."""
        try:
            return self._context.verify(password, hashed)
        except ValueError:
            return False


pwd_hasher = PasswordHasher()


def get_password_hash(password: str) -> str:
    return pwd_hasher.hash(password)


__all__ = ["PasswordHasher", "pwd_hasher", "get_password_hash"]
