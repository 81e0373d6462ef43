from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.adapters.repositories.sqlalchemy_movie_repository import (
    SQLAlchemyMovieRepository,
)
from movie_catalog.infrastructure.config.settings import Settings
from movie_catalog.infrastructure.persistence.database import get_session


def get_settings() -> Settings:
    return Settings()


def get_movie_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> MovieRepository:
    return SQLAlchemyMovieRepository(session, timeout=settings.QUERY_TIMEOUT_SECONDS)
