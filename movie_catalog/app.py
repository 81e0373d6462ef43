from contextlib import asynccontextmanager

from fastapi import FastAPI

from movie_catalog.infrastructure.config.settings import APP_VERSION
from movie_catalog.infrastructure.logging.logger import Logger, setup_logging
from movie_catalog.infrastructure.persistence.database import dispose_engine, get_engine, init_models, set_engine
from movie_catalog.presentation.error_handlers import register_exception_handlers
from movie_catalog.presentation.routers import healthcheck, movies

setup_logging()

logger = Logger.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = get_engine()
    set_engine(engine)
    await init_models(engine)
    logger.info("Database connection pool established")
    try:
        yield
    finally:
        await dispose_engine()
        logger.info("Database connection pool closed")


app = FastAPI(title="Movie Catalog", version=APP_VERSION, lifespan=lifespan)

register_exception_handlers(app)

app.include_router(healthcheck.router)
app.include_router(movies.router)
