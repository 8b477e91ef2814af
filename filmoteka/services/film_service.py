from __future__ import annotations

"""Film service.

Maps repository outcomes to domain errors; repository errors propagate
unchanged and nothing is retried.
"""

from typing import TYPE_CHECKING, List

from filmoteka.repositories.films import FilmRepositoryProtocol
from filmoteka.schemas.enums import FilmSort
from filmoteka.schemas.film import FilmIn, FilmOut, FilmUpdateIn
from filmoteka.services.errors import (
    BadFilmAddData,
    BadFilmUpdateData,
    BadSortParam,
    FilmNotFound,
    FilmsNotFound,
)

if TYPE_CHECKING:
    from loguru import Logger


class FilmService:
    def __init__(self, repo: FilmRepositoryProtocol, log: "Logger") -> None:
        self.repo = repo
        self.log = log

    async def get_films(self, sort_param: str = FilmSort.RATING.value) -> List[FilmOut]:
        try:
            sort = FilmSort(sort_param or FilmSort.RATING.value)
        except ValueError as e:
            raise BadSortParam() from e
        return await self.repo.get_films(sort)

    async def get_film_by_id(self, film_id: int) -> FilmOut:
        film = await self.repo.get_film_by_id(film_id)
        if film is None:
            raise FilmNotFound()
        return film

    async def add_film(self, film: FilmIn) -> FilmOut:
        film_id = await self.repo.add_film(film, film.actor_ids)
        if film_id == 0:
            raise BadFilmAddData()
        return FilmOut(id=film_id, **film.model_dump(exclude={"actor_ids"}))

    async def update_film(self, film: FilmUpdateIn) -> FilmOut:
        if not await self.repo.update_film(film, film.actor_ids):
            raise BadFilmUpdateData()
        return FilmOut(**film.model_dump(exclude={"actor_ids"}))

    async def get_films_by_search(self, text: str) -> List[FilmOut]:
        films = await self.repo.get_films_by_search(text)
        if not films:
            raise FilmsNotFound()
        return films

    async def delete_film(self, film_id: int) -> None:
        if not await self.repo.delete_film(film_id):
            raise FilmNotFound()


__all__ = ["FilmService"]
