from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from movie_catalog.app import app
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.config.dependencies import get_movie_repository
from movie_catalog.infrastructure.persistence.models import table_registry

from .fakes import InMemoryMovieRepository


def _docker_available() -> bool:
    try:
        import docker

        docker.from_env().ping()
    except Exception:
        return False
    return True


requires_docker = pytest.mark.skipif(not _docker_available(), reason="Docker is not available")


@pytest.fixture
def mock_movie_repository():
    """Mock movie repository for use case testing"""
    return AsyncMock(spec=MovieRepository)


@pytest.fixture
def movie_repository():
    """In-memory versioned movie store"""
    return InMemoryMovieRepository()


@pytest_asyncio.fixture
async def api_client(movie_repository):
    """HTTP client whose movie store is the in-memory repository"""
    app.dependency_overrides[get_movie_repository] = lambda: movie_repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@requires_docker
class BaseIntegrationTest:
    """Base class for integration tests against a real PostgreSQL"""

    @pytest.fixture(scope="class")
    def postgres_url(self):
        from testcontainers.postgres import PostgresContainer

        with PostgresContainer("postgres:16", driver="psycopg") as postgres:
            yield postgres.get_connection_url()

    @pytest_asyncio.fixture
    async def postgres_engine(self, postgres_url):
        """Create test database engine"""
        engine = create_async_engine(postgres_url)

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.create_all)

        yield engine

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.drop_all)
        await engine.dispose()

    @pytest_asyncio.fixture
    async def test_session(self, postgres_engine):
        """Create test database session"""
        async with AsyncSession(postgres_engine, expire_on_commit=False) as session:
            yield session
