# tests/utils/factory.py

from datetime import date
from typing import Optional, Sequence
from uuid import uuid4

from sqlalchemy.ext.asyncio import AsyncSession

from filmoteka.core.security import get_password_hash
from filmoteka.db.models.actor import Actor
from filmoteka.db.models.film import Film
from filmoteka.db.models.film_actor import FilmActor
from filmoteka.db.models.user import User
from filmoteka.schemas.enums import Gender, UserRole


async def create_user(
    session: AsyncSession,
    *,
    username: Optional[str] = None,
    password: str = "password123",
    role: UserRole = UserRole.DEFAULT,
) -> User:
    """
    ✅ Insert a user with a real (salted) password hash and commit.
    """
    user = User(
        username=username or f"user_{uuid4().hex[:8]}",
        password=get_password_hash(password),
        role=role.value,
    )
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


async def create_actor(
    session: AsyncSession,
    *,
    name: str = "Keanu",
    surname: str = "Reeves",
    gender: Gender = Gender.MALE,
    birthday: date = date(1964, 9, 2),
) -> Actor:
    actor = Actor(name=name, surname=surname, gender=gender, birthday=birthday)
    session.add(actor)
    await session.commit()
    await session.refresh(actor)
    return actor


async def create_film(
    session: AsyncSession,
    *,
    name: str = "The Matrix",
    description: str = "A hacker learns the truth about reality.",
    date_of_release: date = date(1999, 3, 31),
    rating: float = 8.7,
    actor_ids: Sequence[int] = (),
) -> Film:
    """
    ✅ Insert a film and its cast links directly (bypasses the repository).
    """
    film = Film(name=name, description=description, date_of_release=date_of_release, rating=rating)
    session.add(film)
    await session.flush()
    for actor_id in actor_ids:
        session.add(FilmActor(film_id=film.id, actor_id=actor_id))
    await session.commit()
    await session.refresh(film)
    return film
