from __future__ import annotations

"""
🔗 Filmoteka · Film ⇄ Actor Association
=======================================

Join rows linking a :class:`Film` to an :class:`Actor`.

Conventions
-----------
• Composite primary key `(film_id, actor_id)` ⇒ each pair is unique.
• Both FKs `ON DELETE CASCADE`; repositories also delete join rows
  explicitly inside the same transaction as the parent delete, so SQLite
  without `PRAGMA foreign_keys` behaves the same.
"""

from sqlalchemy import Column, ForeignKey, Index

from filmoteka.db.base_class import Base, BigIntPK


class FilmActor(Base):
    __tablename__ = "film_actors"

    film_id = Column(BigIntPK, ForeignKey("films.id", ondelete="CASCADE"), primary_key=True)
    actor_id = Column(BigIntPK, ForeignKey("actors.id", ondelete="CASCADE"), primary_key=True)

    __table_args__ = (
        Index("ix_film_actors_actor_id", "actor_id"),
    )
