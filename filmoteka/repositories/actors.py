from __future__ import annotations

"""Actor repository.

Reads return the actor-with-films aggregate: one left-joined query through
`film_actors` to `films`, folded client-side into `ActorWithFilms` records.
Rows come back ordered by actor id then film id, so both the aggregate list
and each actor's film list are deterministic.
"""

from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Tuple

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from filmoteka.db.models.actor import Actor
from filmoteka.db.models.film import Film
from filmoteka.db.models.film_actor import FilmActor
from filmoteka.schemas.actor import ActorBase, ActorOut, ActorUpdateIn, ActorWithFilms
from filmoteka.schemas.film import FilmOut

if TYPE_CHECKING:
    from loguru import Logger


class ActorRepositoryProtocol:
    async def get_actor_by_id(self, actor_id: int) -> Optional[ActorWithFilms]:
        raise NotImplementedError

    async def get_actors(self) -> List[ActorWithFilms]:
        raise NotImplementedError

    async def add_actor(self, actor: ActorBase) -> int:
        raise NotImplementedError

    async def update_actor(self, actor: ActorUpdateIn) -> bool:
        raise NotImplementedError

    async def delete_actor(self, actor_id: int) -> bool:
        raise NotImplementedError


def group_actor_rows(rows: Iterable[Tuple[Actor, Optional[Film]]]) -> List[ActorWithFilms]:
    """Fold flat `(actor, film-or-None)` join rows into one record per actor.

    Insertion order of first appearance is kept; a `None` film (outer join
    miss) adds the actor with no film.
    """
    grouped: Dict[int, ActorWithFilms] = {}
    for actor, film in rows:
        entry = grouped.get(actor.id)
        if entry is None:
            entry = ActorWithFilms(actor=ActorOut.model_validate(actor), films=[])
            grouped[actor.id] = entry
        if film is not None and film.id is not None:
            entry.films.append(FilmOut.model_validate(film))
    return list(grouped.values())


class SqlActorRepository(ActorRepositoryProtocol):
    def __init__(self, db: AsyncSession, log: "Logger") -> None:
        self.db = db
        self.log = log

    def _joined(self):
        return (
            select(Actor, Film)
            .outerjoin(FilmActor, FilmActor.actor_id == Actor.id)
            .outerjoin(Film, Film.id == FilmActor.film_id)
            .order_by(Actor.id, Film.id)
            .execution_options(populate_existing=True)
        )

    # ── Reads ────────────────────────────────────────────────
    async def get_actor_by_id(self, actor_id: int) -> Optional[ActorWithFilms]:
        rows = (await self.db.execute(self._joined().where(Actor.id == actor_id))).all()
        grouped = group_actor_rows((r[0], r[1]) for r in rows)
        return grouped[0] if grouped else None

    async def get_actors(self) -> List[ActorWithFilms]:
        rows = (await self.db.execute(self._joined())).all()
        return group_actor_rows((r[0], r[1]) for r in rows)

    # ── Writes ───────────────────────────────────────────────
    async def add_actor(self, actor: ActorBase) -> int:
        try:
            actor_id = (
                await self.db.execute(
                    insert(Actor)
                    .values(
                        name=actor.name,
                        surname=actor.surname,
                        gender=actor.gender,
                        birthday=actor.birthday,
                    )
                    .returning(Actor.id)
                )
            ).scalar_one()
            await self.db.commit()
        except Exception:
            await self._rollback()
            raise
        self.log.debug("actor {} added", actor_id)
        return actor_id

    async def update_actor(self, actor: ActorUpdateIn) -> bool:
        try:
            result = await self.db.execute(
                update(Actor)
                .where(Actor.id == actor.id)
                .values(
                    name=actor.name,
                    surname=actor.surname,
                    gender=actor.gender,
                    birthday=actor.birthday,
                )
            )
            updated = result.rowcount > 0
            await self.db.commit()
        except Exception:
            await self._rollback()
            raise
        return updated

    async def delete_actor(self, actor_id: int) -> bool:
        try:
            await self.db.execute(delete(FilmActor).where(FilmActor.actor_id == actor_id))
            result = await self.db.execute(
                delete(Actor).where(Actor.id == actor_id)
            )
            deleted = result.rowcount > 0
            await self.db.commit()
        except Exception:
            await self._rollback()
            raise
        return deleted

    async def _rollback(self) -> None:
        # Failure here is logged only; the caller re-raises the original error.
        try:
            await self.db.rollback()
        except Exception:
            self.log.exception("rollback failed")


def get_actors_repository(db: AsyncSession, log: "Logger") -> ActorRepositoryProtocol:
    return SqlActorRepository(db, log)


__all__ = [
    "ActorRepositoryProtocol",
    "SqlActorRepository",
    "group_actor_rows",
    "get_actors_repository",
]
