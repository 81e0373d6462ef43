from movie_catalog.applications.interfaces.decoding import decode_body
from movie_catalog.applications.interfaces.dtos.movie import MovieInput
from movie_catalog.domain.models.movie import Movie
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.services.movie_validation import validate_movie
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, body: bytes) -> Movie:
        movie = decode_body(body, MovieInput).to_domain()
        validate_movie(movie)

        created_movie = await self.movie_repository.insert(movie)

        if created_movie.id is None:
            raise RuntimeError("Movie creation failed - no ID assigned")

        logger.info(f"Movie created successfully: {created_movie.id} '{created_movie.title}'")
        return created_movie
