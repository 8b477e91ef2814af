# filmoteka/db/models/__init__.py
from .user import User
from .actor import Actor
from .film import Film
from .film_actor import FilmActor

__all__ = ["User", "Actor", "Film", "FilmActor"]
