from __future__ import annotations

"""
🎭 Filmoteka · Actor
====================

A person appearing in films. Films are linked through `film_actors`
(see :class:`FilmActor`); the aggregate "actor with films" read model is
assembled by the actor repository, not by ORM relationship loading.
"""

from sqlalchemy import CheckConstraint, Column, Date, Enum as SAEnum, Index, String

from filmoteka.db.base_class import Base, PKMixin
from filmoteka.schemas.enums import Gender


class Actor(PKMixin, Base):
    __tablename__ = "actors"

    name = Column(String(40), nullable=False)
    surname = Column(String(40), nullable=False)
    gender = Column(
        SAEnum(Gender, name="actor_gender", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    birthday = Column(Date, nullable=False)

    __table_args__ = (
        CheckConstraint("length(name) > 0", name="name_not_blank"),
        CheckConstraint("length(surname) > 0", name="surname_not_blank"),
        Index("ix_actors_name_surname", "name", "surname"),
    )
