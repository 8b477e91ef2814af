from __future__ import annotations

"""Actor service."""

from typing import TYPE_CHECKING, List

from filmoteka.repositories.actors import ActorRepositoryProtocol
from filmoteka.schemas.actor import ActorIn, ActorOut, ActorUpdateIn, ActorWithFilms
from filmoteka.services.errors import ActorNotFound

if TYPE_CHECKING:
    from loguru import Logger


class ActorService:
    def __init__(self, repo: ActorRepositoryProtocol, log: "Logger") -> None:
        self.repo = repo
        self.log = log

    async def get_actor_by_id(self, actor_id: int) -> ActorWithFilms:
        actor = await self.repo.get_actor_by_id(actor_id)
        if actor is None:
            raise ActorNotFound()
        return actor

    async def get_actors(self) -> List[ActorWithFilms]:
        return await self.repo.get_actors()

    async def add_actor(self, actor: ActorIn) -> ActorOut:
        actor_id = await self.repo.add_actor(actor)
        return ActorOut(id=actor_id, **actor.model_dump())

    async def update_actor(self, actor: ActorUpdateIn) -> ActorOut:
        if not await self.repo.update_actor(actor):
            raise ActorNotFound()
        return ActorOut(**actor.model_dump())

    async def delete_actor(self, actor_id: int) -> None:
        if not await self.repo.delete_actor(actor_id):
            raise ActorNotFound()


__all__ = ["ActorService"]
