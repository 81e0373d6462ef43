from abc import ABC, abstractmethod
from typing import Optional

from movie_catalog.domain.models.movie import Movie


class MovieRepository(ABC):
    """Versioned movie store.

    Every call runs under a deadline; ``timeout`` overrides the store default
    for a single call. Updates are conditioned on the version carried by the
    movie and raise ``EditConflictError`` when the stored version moved on.
    """

    @abstractmethod
    async def insert(self, movie: Movie, *, timeout: Optional[float] = None) -> Movie:
        pass

    @abstractmethod
    async def get(self, movie_id: int, *, timeout: Optional[float] = None) -> Movie:
        pass

    @abstractmethod
    async def update(self, movie: Movie, *, timeout: Optional[float] = None) -> int:
        pass

    @abstractmethod
    async def delete(self, movie_id: int, *, timeout: Optional[float] = None) -> None:
        pass
