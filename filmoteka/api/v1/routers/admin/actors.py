"""
Filmoteka · Admin Actor Management
==================================

Endpoints (session + `admin` role, enforced by the admin package router)
------------------------------------------------------------------------
- POST   /actor             : Create actor
- PUT    /actor             : Update actor (404 if the id is unknown)
- DELETE /actor/{actor_id}  : Delete actor and unlink it from every film
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Response

from filmoteka.core.exceptions import NotFoundException
from filmoteka.dependencies.services import get_actor_service
from filmoteka.schemas.actor import ActorIn, ActorOut, ActorUpdateIn
from filmoteka.schemas.user import ResultOut
from filmoteka.security_headers import set_sensitive_cache
from filmoteka.services.actor_service import ActorService
from filmoteka.services.errors import ActorNotFound

router = APIRouter(tags=["Admin Actors"])


@router.post("/actor", response_model=ActorOut, summary="Create actor")
async def add_actor(
    payload: ActorIn,
    response: Response,
    actors: ActorService = Depends(get_actor_service),
) -> ActorOut:
    set_sensitive_cache(response)
    return await actors.add_actor(payload)


@router.put("/actor", response_model=ActorOut, summary="Update actor")
async def update_actor(
    payload: ActorUpdateIn,
    response: Response,
    actors: ActorService = Depends(get_actor_service),
) -> ActorOut:
    set_sensitive_cache(response)
    try:
        return await actors.update_actor(payload)
    except ActorNotFound as e:
        raise NotFoundException(e.message)


@router.delete("/actor/{actor_id}", response_model=ResultOut, summary="Delete actor")
async def delete_actor(
    response: Response,
    actor_id: int = Path(..., gt=0),
    actors: ActorService = Depends(get_actor_service),
) -> ResultOut:
    set_sensitive_cache(response)
    try:
        await actors.delete_actor(actor_id)
    except ActorNotFound as e:
        raise NotFoundException(e.message)
    return ResultOut()


__all__ = ["router"]
