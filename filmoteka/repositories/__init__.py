"""
Repository package for data access layers.

Each module exposes a `*RepositoryProtocol` interface, one concrete
implementation (SQLAlchemy for `films`, `actors`, `users`; Redis for
`sessions`) and a small factory used by `filmoteka.dependencies.services`.
Tests substitute in-memory fakes that implement the same interface.
"""
