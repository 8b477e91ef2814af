"""
Filmoteka · Public Film Catalog
===============================

Endpoints (no auth)
-------------------
- GET /films?sort_param=rating|name|date_of_release : List films, descending
- GET /film/{film_id}                                : Fetch single film
- GET /film/search/{search_str}                      : Search by film name or actor full name

Notes
-----
- Sorting is whitelisted; anything else is a 400.
- An empty search result is reported as 404 (`films not found`).
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Path, Query

from filmoteka.core.exceptions import BadRequestException, NotFoundException
from filmoteka.dependencies.services import get_film_service
from filmoteka.schemas.enums import FilmSort
from filmoteka.schemas.film import FilmOut
from filmoteka.services.errors import BadSortParam, FilmNotFound, FilmsNotFound
from filmoteka.services.film_service import FilmService

router = APIRouter(tags=["Films"])


@router.get("/films", response_model=List[FilmOut], summary="List films")
async def get_films(
    sort_param: str = Query(FilmSort.RATING.value, description="name | rating | date_of_release"),
    films: FilmService = Depends(get_film_service),
) -> List[FilmOut]:
    try:
        return await films.get_films(sort_param)
    except BadSortParam as e:
        raise BadRequestException(e.message)


@router.get("/film/search/{search_str}", response_model=List[FilmOut], summary="Search films")
async def get_films_by_search(
    search_str: str = Path(..., min_length=1, max_length=255),
    films: FilmService = Depends(get_film_service),
) -> List[FilmOut]:
    try:
        return await films.get_films_by_search(search_str)
    except FilmsNotFound as e:
        raise NotFoundException(e.message)


@router.get("/film/{film_id}", response_model=FilmOut, summary="Get film")
async def get_film_by_id(
    film_id: int = Path(..., gt=0),
    films: FilmService = Depends(get_film_service),
) -> FilmOut:
    try:
        return await films.get_film_by_id(film_id)
    except FilmNotFound as e:
        raise NotFoundException(e.message)


__all__ = ["router"]
