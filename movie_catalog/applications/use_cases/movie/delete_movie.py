from typing import Union

from movie_catalog.applications.interfaces.dtos.message import Message
from movie_catalog.applications.use_cases.movie.movie_id import parse_movie_id
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class DeleteMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: Union[str, int]) -> Message:
        parsed_id = parse_movie_id(movie_id)
        await self.movie_repository.delete(parsed_id)

        logger.info(f"Movie {parsed_id} deleted")
        return Message(message="movie successfully deleted")
