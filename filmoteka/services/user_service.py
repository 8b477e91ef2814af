from __future__ import annotations

"""User service: login, registration and role lookup."""

from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError

from filmoteka.core.security import PasswordHasher
from filmoteka.db.models.user import User
from filmoteka.repositories.users import UserRepositoryProtocol
from filmoteka.services.errors import BadCredentials, NoUser, UserAlreadyExists

if TYPE_CHECKING:
    from loguru import Logger


class UserService:
    def __init__(self, repo: UserRepositoryProtocol, hasher: PasswordHasher, log: "Logger") -> None:
        self.repo = repo
        self.hasher = hasher
        self.log = log

    async def login(self, username: str, password: str) -> User:
        """Return the user for a matching username/password pair.

        Unknown usernames and wrong passwords raise the same `BadCredentials`.
        """
        user = await self.repo.get_user_by_username(username)
        if user is None or not self.hasher.verify(password, user.password):
            self.log.info("login rejected for {!r}", username)
            raise BadCredentials()
        return user

    async def register(self, username: str, password: str) -> User:
        if await self.repo.get_user_by_username(username) is not None:
            raise UserAlreadyExists()
        try:
            return await self.repo.register(username, self.hasher.hash(password))
        except IntegrityError as e:
            # a concurrent registration won the unique index
            raise UserAlreadyExists() from e

    async def get_user_role(self, user_id: int) -> str:
        role = await self.repo.get_user_role(user_id)
        if not role:
            raise NoUser()
        return role


__all__ = ["UserService"]
