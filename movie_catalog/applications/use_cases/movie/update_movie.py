from typing import Optional, Union

from movie_catalog.applications.interfaces.decoding import decode_body
from movie_catalog.applications.interfaces.dtos.movie import MoviePatch
from movie_catalog.applications.use_cases.movie.movie_id import parse_movie_id
from movie_catalog.domain.exceptions import EditConflictError
from movie_catalog.domain.models.movie import Movie
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.services.movie_validation import validate_movie
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class UpdateMovieUseCase:
    """Partial update guarded by optimistic locking.

    The movie is read, optionally checked against the version the client
    expects, patched in memory, validated and written back conditioned on the
    version it was read at. Conflicts are reported to the client, never
    retried here.
    """

    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(
        self, movie_id: Union[str, int], body: bytes, expected_version: Optional[str] = None
    ) -> Movie:
        movie = await self.movie_repository.get(parse_movie_id(movie_id))

        if expected_version and expected_version != str(movie.version):
            logger.warning(
                f"Movie {movie.id} is at version {movie.version}, client expected {expected_version}"
            )
            raise EditConflictError(f"Movie {movie.id} is at version {movie.version}, not {expected_version}")

        patch = decode_body(body, MoviePatch)
        patch.apply_to(movie)

        validate_movie(movie)

        try:
            movie.version = await self.movie_repository.update(movie)
        except EditConflictError:
            logger.warning(f"Movie {movie.id} changed since version {movie.version} was read")
            raise

        logger.info(f"Movie {movie.id} updated to version {movie.version}")
        return movie
