from typing import Union

from movie_catalog.applications.use_cases.movie.movie_id import parse_movie_id
from movie_catalog.domain.models.movie import Movie
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository


class GetMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: Union[str, int]) -> Movie:
        return await self.movie_repository.get(parse_movie_id(movie_id))
