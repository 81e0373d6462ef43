from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine

from movie_catalog.infrastructure.config.settings import Settings
from movie_catalog.infrastructure.logging.logger import Logger
from movie_catalog.infrastructure.persistence.models import table_registry

logger = Logger.get_logger(__name__)


class _EngineStore:
    engine: Optional[AsyncEngine] = None


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    max_idle = max(settings.DB_MAX_IDLE_CONNS, 1)
    max_open = max(settings.DB_MAX_OPEN_CONNS, max_idle)
    return create_async_engine(
        settings.DATABASE_URL,
        pool_size=max_idle,
        max_overflow=max_open - max_idle,
        pool_recycle=settings.DB_MAX_IDLE_TIME_SECONDS,
        pool_timeout=settings.DB_CONNECT_TIMEOUT_SECONDS,
        pool_pre_ping=True,
        connect_args={"connect_timeout": settings.DB_CONNECT_TIMEOUT_SECONDS},
    )


def set_engine(engine: AsyncEngine) -> None:
    _EngineStore.engine = engine


def get_engine() -> AsyncEngine:
    if _EngineStore.engine is None:
        _EngineStore.engine = create_engine_from_settings(Settings())
    return _EngineStore.engine


async def init_models(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(table_registry.metadata.create_all)
    logger.info("Database schema is ready")


async def get_session():
    engine = get_engine()
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


async def dispose_engine() -> None:
    if _EngineStore.engine is not None:
        await _EngineStore.engine.dispose()
        _EngineStore.engine = None
