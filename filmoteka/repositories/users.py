from __future__ import annotations

"""User repository: lookup by username, registration, and role lookup."""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from filmoteka.db.models.user import User
from filmoteka.schemas.enums import UserRole

if TYPE_CHECKING:
    from loguru import Logger


class UserRepositoryProtocol:
    async def get_user_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    async def register(self, username: str, password_hash: str) -> User:
        raise NotImplementedError

    async def get_user_role(self, user_id: int) -> Optional[str]:
        raise NotImplementedError


class SqlUserRepository(UserRepositoryProtocol):
    def __init__(self, db: AsyncSession, log: "Logger") -> None:
        self.db = db
        self.log = log

    async def get_user_by_username(self, username: str) -> Optional[User]:
        stmt = select(User).where(User.username == username)
        return (await self.db.execute(stmt)).scalar_one_or_none()

    async def register(self, username: str, password_hash: str) -> User:
        """Insert a `default`-role user; a unique violation propagates as `IntegrityError`."""
        user = User(username=username, password=password_hash, role=UserRole.DEFAULT.value)
        try:
            self.db.add(user)
            await self.db.flush()
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        self.log.debug("user {} registered", user.id)
        return user

    async def get_user_role(self, user_id: int) -> Optional[str]:
        stmt = select(User.role).where(User.id == user_id)
        return (await self.db.execute(stmt)).scalar_one_or_none()


def get_users_repository(db: AsyncSession, log: "Logger") -> UserRepositoryProtocol:
    return SqlUserRepository(db, log)


__all__ = ["UserRepositoryProtocol", "SqlUserRepository", "get_users_repository"]
