from __future__ import annotations

"""
Film request/response schemas (Pydantic v2).

`FilmIn` / `FilmUpdateIn` validate admin write bodies; `FilmOut` is the
public shape for every film the API returns.
"""

from datetime import date
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FilmBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    description: str = Field(..., min_length=1, max_length=1000)
    date_of_release: date
    rating: float = Field(..., ge=0, le=10)


class FilmIn(FilmBase):
    """Body of `POST /admin/film`."""
    actor_ids: List[int] = Field(default_factory=list)

    @field_validator("actor_ids")
    @classmethod
    def _positive_ids(cls, v: List[int]) -> List[int]:
        if any(i <= 0 for i in v):
            raise ValueError("actor ids must be positive")
        return v


class FilmUpdateIn(FilmIn):
    """Body of `PUT /admin/film`; the actor list replaces the current cast."""
    id: int = Field(..., gt=0)


class FilmOut(FilmBase):
    model_config = ConfigDict(from_attributes=True)

    id: int


__all__ = ["FilmBase", "FilmIn", "FilmUpdateIn", "FilmOut"]
