from http import HTTPStatus
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import JSONResponse

from movie_catalog.applications.interfaces.dtos.message import Message
from movie_catalog.applications.interfaces.dtos.movie import movie_envelope
from movie_catalog.applications.use_cases.movie.create_movie import CreateMovieUseCase
from movie_catalog.applications.use_cases.movie.delete_movie import DeleteMovieUseCase
from movie_catalog.applications.use_cases.movie.get_movie import GetMovieUseCase
from movie_catalog.applications.use_cases.movie.update_movie import UpdateMovieUseCase
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.config.dependencies import get_movie_repository
from movie_catalog.presentation.request_body import read_body

router = APIRouter(prefix="/v1/movies", tags=["movies"])

MovieRepositoryDep = Annotated[MovieRepository, Depends(get_movie_repository)]


@router.post("", status_code=HTTPStatus.CREATED)
async def create_movie(request: Request, movie_repository: MovieRepositoryDep):
    use_case = CreateMovieUseCase(movie_repository)
    movie = await use_case.execute(await read_body(request))
    return JSONResponse(
        status_code=HTTPStatus.CREATED,
        content=movie_envelope(movie),
        headers={"Location": f"{router.prefix}/{movie.id}"},
    )


@router.get("/{movie_id}")
async def read_movie(movie_id: str, movie_repository: MovieRepositoryDep):
    use_case = GetMovieUseCase(movie_repository)
    movie = await use_case.execute(movie_id)
    return JSONResponse(content=movie_envelope(movie))


@router.patch("/{movie_id}")
async def update_movie(
    movie_id: str,
    request: Request,
    movie_repository: MovieRepositoryDep,
    x_expected_version: Annotated[Optional[str], Header()] = None,
):
    use_case = UpdateMovieUseCase(movie_repository)
    movie = await use_case.execute(movie_id, await read_body(request), expected_version=x_expected_version)
    return JSONResponse(content=movie_envelope(movie))


@router.delete("/{movie_id}", response_model=Message)
async def delete_movie(movie_id: str, movie_repository: MovieRepositoryDep):
    use_case = DeleteMovieUseCase(movie_repository)
    return await use_case.execute(movie_id)
