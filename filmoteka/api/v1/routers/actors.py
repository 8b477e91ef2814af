"""
Filmoteka · Public Actors
=========================

Endpoints (no auth)
-------------------
- GET /actors             : Every actor with the films they appear in (ordered by id)
- GET /actor/{actor_id}   : One actor with their films
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Path

from filmoteka.core.exceptions import NotFoundException
from filmoteka.dependencies.services import get_actor_service
from filmoteka.schemas.actor import ActorWithFilms
from filmoteka.services.actor_service import ActorService
from filmoteka.services.errors import ActorNotFound

router = APIRouter(tags=["Actors"])


@router.get("/actors", response_model=List[ActorWithFilms], summary="List actors")
async def get_actors(actors: ActorService = Depends(get_actor_service)) -> List[ActorWithFilms]:
    return await actors.get_actors()


@router.get("/actor/{actor_id}", response_model=ActorWithFilms, summary="Get actor")
async def get_actor_by_id(
    actor_id: int = Path(..., gt=0),
    actors: ActorService = Depends(get_actor_service),
) -> ActorWithFilms:
    try:
        return await actors.get_actor_by_id(actor_id)
    except ActorNotFound as e:
        raise NotFoundException(e.message)


__all__ = ["router"]
