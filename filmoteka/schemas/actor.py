from __future__ import annotations

"""Actor request/response schemas and the actor-with-films read model."""

from datetime import date
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from filmoteka.schemas.enums import Gender
from filmoteka.schemas.film import FilmOut


class ActorBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=40)
    surname: str = Field(..., min_length=1, max_length=40)
    gender: Gender
    birthday: date


class ActorIn(ActorBase):
    """Body of `POST /admin/actor`."""


class ActorUpdateIn(ActorBase):
    """Body of `PUT /admin/actor`."""
    id: int = Field(..., gt=0)


class ActorOut(ActorBase):
    model_config = ConfigDict(from_attributes=True)

    id: int


class ActorWithFilms(BaseModel):
    """One actor plus every film it appears in (possibly none)."""
    actor: ActorOut
    films: List[FilmOut] = Field(default_factory=list)


__all__ = ["ActorBase", "ActorIn", "ActorUpdateIn", "ActorOut", "ActorWithFilms"]
