"""
Filmoteka · Admin Film Management
=================================

Endpoints (session + `admin` role, enforced by the admin package router)
------------------------------------------------------------------------
- POST   /film            : Create film and its cast (one transaction)
- PUT    /film            : Replace film fields and its whole cast (one transaction)
- DELETE /film/{film_id}  : Delete film together with its cast rows

Failure mapping
---------------
- Unknown actor id in `actor_ids` on create → 400 `bad add data`
- Unknown film id or unknown actor id on update → 400 `bad update data`
- Unknown film id on delete → 404
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Response

from filmoteka.core.exceptions import BadRequestException, NotFoundException
from filmoteka.dependencies.services import get_film_service
from filmoteka.schemas.film import FilmIn, FilmOut, FilmUpdateIn
from filmoteka.schemas.user import ResultOut
from filmoteka.security_headers import set_sensitive_cache
from filmoteka.services.errors import BadFilmAddData, BadFilmUpdateData, FilmNotFound
from filmoteka.services.film_service import FilmService

router = APIRouter(tags=["Admin Films"])


# ─────────────────────────────────────────────────────────────────────────────
# ➕ Create film
# ─────────────────────────────────────────────────────────────────────────────
@router.post("/film", response_model=FilmOut, summary="Create film")
async def add_film(
    payload: FilmIn,
    response: Response,
    films: FilmService = Depends(get_film_service),
) -> FilmOut:
    """
    Create a film and link it to `actor_ids`.

    Steps
    -----
    1) Body validated by `FilmIn` (422 otherwise); set `no-store`.
    2) Insert film + join rows atomically; any unknown actor rolls it all back.
    """
    set_sensitive_cache(response)
    try:
        return await films.add_film(payload)
    except BadFilmAddData as e:
        raise BadRequestException(e.message)


# ─────────────────────────────────────────────────────────────────────────────
# ✏️ Update film
# ─────────────────────────────────────────────────────────────────────────────
@router.put("/film", response_model=FilmOut, summary="Update film")
async def update_film(
    payload: FilmUpdateIn,
    response: Response,
    films: FilmService = Depends(get_film_service),
) -> FilmOut:
    set_sensitive_cache(response)
    try:
        return await films.update_film(payload)
    except BadFilmUpdateData as e:
        raise BadRequestException(e.message)


# ─────────────────────────────────────────────────────────────────────────────
# 🗑️ Delete film
# ─────────────────────────────────────────────────────────────────────────────
@router.delete("/film/{film_id}", response_model=ResultOut, summary="Delete film")
async def delete_film(
    response: Response,
    film_id: int = Path(..., gt=0),
    films: FilmService = Depends(get_film_service),
) -> ResultOut:
    set_sensitive_cache(response)
    try:
        await films.delete_film(film_id)
    except FilmNotFound as e:
        raise NotFoundException(e.message)
    return ResultOut()


__all__ = ["router"]
