from datetime import datetime, timezone
from typing import Dict, Optional

from movie_catalog.domain.exceptions import EditConflictError, NotFoundError
from movie_catalog.domain.models.movie import Movie
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository


class InMemoryMovieRepository(MovieRepository):
    """Dictionary-backed store with the same version semantics as the SQL one."""

    def __init__(self):
        self.rows: Dict[int, Movie] = {}
        self.reads = 0
        self.writes = 0
        self._next_id = 1

    def seed(self, movie: Movie) -> Movie:
        stored = movie.model_copy(deep=True)
        if stored.id is None:
            stored.id = self._next_id
        if stored.created_at is None:
            stored.created_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
        self.rows[stored.id] = stored
        self._next_id = max(self._next_id, stored.id + 1)
        return stored.model_copy(deep=True)

    async def insert(self, movie: Movie, *, timeout: Optional[float] = None) -> Movie:
        self.writes += 1
        return self.seed(movie.model_copy(update={"id": None, "created_at": None, "version": 1}))

    async def get(self, movie_id: int, *, timeout: Optional[float] = None) -> Movie:
        self.reads += 1
        if movie_id not in self.rows:
            raise NotFoundError(f"Movie with id {movie_id} not found")
        return self.rows[movie_id].model_copy(deep=True)

    async def update(self, movie: Movie, *, timeout: Optional[float] = None) -> int:
        stored = self.rows.get(movie.id)
        if stored is None or stored.version != movie.version:
            raise EditConflictError(f"Movie {movie.id} is no longer at version {movie.version}")

        self.writes += 1
        self.rows[movie.id] = movie.model_copy(
            update={"version": stored.version + 1, "created_at": stored.created_at}, deep=True
        )
        return stored.version + 1

    async def delete(self, movie_id: int, *, timeout: Optional[float] = None) -> None:
        if movie_id not in self.rows:
            raise NotFoundError(f"Movie with id {movie_id} not found")
        self.writes += 1
        del self.rows[movie_id]
