from __future__ import annotations

"""Film repository.

Interface plus the SQLAlchemy implementation. Every write that touches the
cast (`film_actors`) runs in one transaction with the film row: either the
film and all of its join rows are committed, or nothing is.

A missing actor id is not an error here: `add_film` reports it as id `0` and
`update_film` as `False`, after rolling the transaction back. Store errors
roll back and propagate.
"""

from typing import TYPE_CHECKING, Dict, List, Optional, Sequence

from sqlalchemy import delete, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from filmoteka.db.models.actor import Actor
from filmoteka.db.models.film import Film
from filmoteka.db.models.film_actor import FilmActor
from filmoteka.schemas.enums import FilmSort
from filmoteka.schemas.film import FilmBase, FilmOut, FilmUpdateIn

if TYPE_CHECKING:
    from loguru import Logger


_SORT_COLUMNS: Dict[FilmSort, object] = {
    FilmSort.NAME: Film.name,
    FilmSort.RATING: Film.rating,
    FilmSort.DATE_OF_RELEASE: Film.date_of_release,
}


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class FilmRepositoryProtocol:
    async def get_films(self, sort: FilmSort = FilmSort.RATING) -> List[FilmOut]:
        raise NotImplementedError

    async def get_film_by_id(self, film_id: int) -> Optional[FilmOut]:
        raise NotImplementedError

    async def add_film(self, film: FilmBase, actor_ids: Sequence[int]) -> int:
        raise NotImplementedError

    async def update_film(self, film: FilmUpdateIn, actor_ids: Sequence[int]) -> bool:
        raise NotImplementedError

    async def delete_film(self, film_id: int) -> bool:
        raise NotImplementedError

    async def get_films_by_search(self, text: str) -> List[FilmOut]:
        raise NotImplementedError


class SqlFilmRepository(FilmRepositoryProtocol):
    """Film persistence over an `AsyncSession` (one session per request)."""

    def __init__(self, db: AsyncSession, log: "Logger") -> None:
        self.db = db
        self.log = log

    # ── Reads ────────────────────────────────────────────────
    async def get_films(self, sort: FilmSort = FilmSort.RATING) -> List[FilmOut]:
        column = _SORT_COLUMNS[sort]
        stmt = select(Film).order_by(column.desc(), Film.id)
        films = (await self.db.execute(stmt)).scalars().all()
        return [FilmOut.model_validate(f) for f in films]

    async def get_film_by_id(self, film_id: int) -> Optional[FilmOut]:
        stmt = select(Film).where(Film.id == film_id).execution_options(populate_existing=True)
        film = (await self.db.execute(stmt)).scalar_one_or_none()
        return FilmOut.model_validate(film) if film is not None else None

    async def get_films_by_search(self, text: str) -> List[FilmOut]:
        pattern = f"%{_escape_like(text.lower())}%"
        full_name = func.lower(Actor.name + " " + Actor.surname)
        stmt = (
            select(Film)
            .distinct()
            .outerjoin(FilmActor, FilmActor.film_id == Film.id)
            .outerjoin(Actor, Actor.id == FilmActor.actor_id)
            .where(
                or_(
                    func.lower(Film.name).like(pattern, escape="\\"),
                    full_name.like(pattern, escape="\\"),
                )
            )
            .order_by(Film.id)
        )
        films = (await self.db.execute(stmt)).scalars().all()
        return [FilmOut.model_validate(f) for f in films]

    # ── Writes (transactional) ───────────────────────────────
    async def add_film(self, film: FilmBase, actor_ids: Sequence[int]) -> int:
        try:
            film_id = (
                await self.db.execute(
                    insert(Film)
                    .values(
                        name=film.name,
                        description=film.description,
                        date_of_release=film.date_of_release,
                        rating=film.rating,
                    )
                    .returning(Film.id)
                )
            ).scalar_one()

            if not await self._link_actors(film_id, actor_ids):
                await self._rollback()
                return 0

            await self.db.commit()
        except Exception:
            await self._rollback(quiet=True)
            raise

        self.log.debug("film {} added with {} actors", film_id, len(set(actor_ids)))
        return film_id

    async def update_film(self, film: FilmUpdateIn, actor_ids: Sequence[int]) -> bool:
        try:
            result = await self.db.execute(
                update(Film)
                .where(Film.id == film.id)
                .values(
                    name=film.name,
                    description=film.description,
                    date_of_release=film.date_of_release,
                    rating=film.rating,
                )
            )
            if result.rowcount == 0:
                self.log.info("film {} not updated: no such film", film.id)
                await self._rollback()
                return False

            await self.db.execute(delete(FilmActor).where(FilmActor.film_id == film.id))

            if not await self._link_actors(film.id, actor_ids):
                await self._rollback()
                return False

            await self.db.commit()
        except Exception:
            await self._rollback(quiet=True)
            raise

        self.log.debug("film {} updated", film.id)
        return True

    async def delete_film(self, film_id: int) -> bool:
        try:
            await self.db.execute(delete(FilmActor).where(FilmActor.film_id == film_id))
            result = await self.db.execute(
                delete(Film).where(Film.id == film_id)
            )
            deleted = result.rowcount > 0
            await self.db.commit()
        except Exception:
            await self._rollback(quiet=True)
            raise
        return deleted

    # ── Helpers ──────────────────────────────────────────────
    async def _link_actors(self, film_id: int, actor_ids: Sequence[int]) -> bool:
        """Insert one join row per distinct actor id; False if any actor is missing."""
        unique_ids = list(dict.fromkeys(actor_ids))
        for actor_id in unique_ids:
            found = (
                await self.db.execute(select(Actor.id).where(Actor.id == actor_id))
            ).scalar_one_or_none()
            if found is None:
                self.log.info("film {} write rejected: actor {} does not exist", film_id, actor_id)
                return False

        if unique_ids:
            await self.db.execute(
                insert(FilmActor),
                [{"film_id": film_id, "actor_id": actor_id} for actor_id in unique_ids],
            )
        return True

    async def _rollback(self, *, quiet: bool = False) -> None:
        """Roll back; with `quiet`, a failure is only logged so the original error wins."""
        try:
            await self.db.rollback()
        except Exception:
            self.log.exception("rollback failed")
            if not quiet:
                raise


def get_films_repository(db: AsyncSession, log: "Logger") -> FilmRepositoryProtocol:
    return SqlFilmRepository(db, log)


__all__ = [
    "FilmRepositoryProtocol",
    "SqlFilmRepository",
    "get_films_repository",
]
