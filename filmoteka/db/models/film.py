from __future__ import annotations

"""
🎬 Filmoteka · Film
===================

Catalog film. Cast membership lives in `film_actors`; every write that
touches a film's cast runs in one transaction together with the film row
(see `filmoteka.repositories.films`).

Constraints
-----------
• name 1..150, description 1..1000 (also validated at the edge)
• rating within [0, 10]
"""

from sqlalchemy import CheckConstraint, Column, Date, Float, Index, String

from filmoteka.db.base_class import Base, PKMixin


class Film(PKMixin, Base):
    __tablename__ = "films"

    name = Column(String(150), nullable=False)
    description = Column(String(1000), nullable=False)
    date_of_release = Column(Date, nullable=False)
    rating = Column(Float, nullable=False)

    __table_args__ = (
        CheckConstraint("length(name) > 0", name="name_not_blank"),
        CheckConstraint("rating >= 0 AND rating <= 10", name="rating_range"),
        Index("ix_films_rating", "rating"),
        Index("ix_films_date_of_release", "date_of_release"),
    )
