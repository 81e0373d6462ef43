import asyncio
from typing import Awaitable, Optional, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.domain.exceptions import EditConflictError, NotFoundError, PersistenceError
from movie_catalog.domain.models.movie import Movie as DomainMovie
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.logging.logger import Logger
from movie_catalog.infrastructure.persistence.models import Movie as SQLMovie

logger = Logger.get_logger(__name__)

T = TypeVar("T")

DEFAULT_QUERY_TIMEOUT = 3.0


class SQLAlchemyMovieRepository(MovieRepository):
    """Movie store over an ``AsyncSession``.

    Each public call is a single short transaction committed (or rolled back)
    before returning, so no connection is held between calls. Writes are one
    statement each; a call cancelled by its deadline leaves nothing applied.
    """

    def __init__(self, session: AsyncSession, timeout: float = DEFAULT_QUERY_TIMEOUT):
        self.session = session
        self.timeout = timeout

    def _to_domain(self, sql_movie: SQLMovie) -> DomainMovie:
        return DomainMovie(
            id=sql_movie.id,
            created_at=sql_movie.created_at,
            title=sql_movie.title,
            year=sql_movie.year,
            runtime=sql_movie.runtime,
            genres=list(sql_movie.genres or []),
            version=sql_movie.version,
        )

    async def _rollback(self) -> None:
        try:
            await self.session.rollback()
        except SQLAlchemyError:
            logger.exception("Rollback failed; the connection will be discarded by the pool")

    async def _run(self, operation: str, work: Awaitable[T], timeout: Optional[float]) -> T:
        deadline = self.timeout if timeout is None else timeout
        try:
            return await asyncio.wait_for(work, timeout=deadline)
        except asyncio.TimeoutError as e:
            await self._rollback()
            logger.error(f"Movie {operation} timed out after {deadline}s")
            raise PersistenceError(f"movie {operation} timed out after {deadline}s") from e
        except SQLAlchemyError as e:
            await self._rollback()
            logger.exception(f"Movie {operation} failed: {e}")
            raise PersistenceError(f"movie {operation} failed") from e

    async def insert(self, movie: DomainMovie, *, timeout: Optional[float] = None) -> DomainMovie:
        return await self._run("insert", self._insert(movie), timeout)

    async def get(self, movie_id: int, *, timeout: Optional[float] = None) -> DomainMovie:
        if movie_id < 1:
            raise NotFoundError(f"Movie with id {movie_id} not found")
        return await self._run("get", self._get(movie_id), timeout)

    async def update(self, movie: DomainMovie, *, timeout: Optional[float] = None) -> int:
        if movie.id is None or movie.id < 1:
            # no stored row can match this id and version pair
            raise EditConflictError(f"Movie {movie.id} is no longer at version {movie.version}")
        return await self._run("update", self._update(movie), timeout)

    async def delete(self, movie_id: int, *, timeout: Optional[float] = None) -> None:
        if movie_id < 1:
            raise NotFoundError(f"Movie with id {movie_id} not found")
        await self._run("delete", self._delete(movie_id), timeout)

    async def _insert(self, movie: DomainMovie) -> DomainMovie:
        sql_movie = SQLMovie(
            title=movie.title,
            year=movie.year,
            runtime=movie.runtime,
            genres=list(movie.genres),
        )
        self.session.add(sql_movie)
        await self.session.commit()
        await self.session.refresh(sql_movie)
        await self.session.commit()
        return self._to_domain(sql_movie)

    async def _get(self, movie_id: int) -> DomainMovie:
        # populate_existing: a movie already in the identity map may carry a stale version
        query = select(SQLMovie).where(SQLMovie.id == movie_id).execution_options(populate_existing=True)
        sql_movie = await self.session.scalar(query)
        await self.session.commit()

        if sql_movie is None:
            raise NotFoundError(f"Movie with id {movie_id} not found")
        return self._to_domain(sql_movie)

    async def _update(self, movie: DomainMovie) -> int:
        query = (
            update(SQLMovie)
            .where(SQLMovie.id == movie.id, SQLMovie.version == movie.version)
            .values(
                title=movie.title,
                year=movie.year,
                runtime=movie.runtime,
                genres=list(movie.genres),
                version=SQLMovie.version + 1,
            )
            .returning(SQLMovie.version)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(query)
        new_version = result.scalar_one_or_none()

        if new_version is None:
            await self.session.rollback()
            raise EditConflictError(f"Movie {movie.id} is no longer at version {movie.version}")

        await self.session.commit()
        return new_version

    async def _delete(self, movie_id: int) -> None:
        query = delete(SQLMovie).where(SQLMovie.id == movie_id).execution_options(synchronize_session=False)
        result = await self.session.execute(query)

        if result.rowcount == 0:
            await self.session.rollback()
            raise NotFoundError(f"Movie with id {movie_id} not found")

        await self.session.commit()
