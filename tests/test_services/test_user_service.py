from __future__ import annotations

from typing import Dict, Optional

import pytest
from loguru import logger
from sqlalchemy.exc import IntegrityError

from filmoteka.core.security import PasswordHasher
from filmoteka.db.models.user import User
from filmoteka.repositories.users import SqlUserRepository, UserRepositoryProtocol
from filmoteka.services.errors import BadCredentials, NoUser, UserAlreadyExists
from filmoteka.services.user_service import UserService


class FakeUserRepository(UserRepositoryProtocol):
    def __init__(self) -> None:
        self.users: Dict[str, User] = {}
        self.race_on_register = False

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return self.users.get(username)

    async def register(self, username: str, password_hash: str) -> User:
        if self.race_on_register:
            raise IntegrityError("INSERT INTO users", {}, Exception("unique violation"))
        user = User(id=len(self.users) + 1, username=username, password=password_hash, role="default")
        self.users[username] = user
        return user

    async def get_user_role(self, user_id: int) -> Optional[str]:
        for user in self.users.values():
            if user.id == user_id:
                return user.role
        return None


@pytest.fixture()
def repo() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture()
def service(repo: FakeUserRepository) -> UserService:
    return UserService(repo, PasswordHasher(), logger)


@pytest.mark.anyio
async def test_register_stores_salted_hash(service: UserService, repo: FakeUserRepository):
    user = await service.register("neo", "thereisnospoon")

    assert user.role == "default"
    assert user.password != "thereisnospoon"
    other = await service.register("trinity", "thereisnospoon")
    assert other.password != user.password


@pytest.mark.anyio
async def test_register_duplicate_username(service: UserService):
    await service.register("neo", "thereisnospoon")

    with pytest.raises(UserAlreadyExists):
        await service.register("neo", "anotherpassword")


@pytest.mark.anyio
async def test_register_unique_violation_maps_to_already_exists(service: UserService, repo: FakeUserRepository):
    repo.race_on_register = True
    with pytest.raises(UserAlreadyExists):
        await service.register("morpheus", "redpill12345")


@pytest.mark.anyio
async def test_login_ok(service: UserService):
    registered = await service.register("neo", "thereisnospoon")

    user = await service.login("neo", "thereisnospoon")
    assert user.id == registered.id


@pytest.mark.anyio
@pytest.mark.parametrize("username,password", [("neo", "wrong-password"), ("ghost", "thereisnospoon")])
async def test_login_rejects_bad_credentials(service: UserService, username: str, password: str):
    await service.register("neo", "thereisnospoon")

    with pytest.raises(BadCredentials):
        await service.login(username, password)


@pytest.mark.anyio
async def test_get_user_role(service: UserService):
    user = await service.register("neo", "thereisnospoon")

    assert await service.get_user_role(user.id) == "default"
    with pytest.raises(NoUser):
        await service.get_user_role(999)


# ─────────────────────────────────────────────────────────────
# Against the SQL repository
# ─────────────────────────────────────────────────────────────
@pytest.mark.anyio
async def test_register_and_login_against_database(db_session):
    service = UserService(SqlUserRepository(db_session, logger), PasswordHasher(), logger)

    user = await service.register("smith", "agent-smith-1")
    assert user.id > 0
    assert (await service.login("smith", "agent-smith-1")).id == user.id
    assert await service.get_user_role(user.id) == "default"
    with pytest.raises(UserAlreadyExists):
        await service.register("smith", "agent-smith-2")
