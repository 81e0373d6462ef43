import uvicorn

from movie_catalog.infrastructure.config.settings import Settings
from movie_catalog.infrastructure.logging.logger import Logger, setup_logging

logger = Logger.get_logger(__name__)


def main() -> None:
    setup_logging()
    settings = Settings()
    logger.info(f"Starting server on port {settings.PORT} ({settings.ENV})")
    uvicorn.run("movie_catalog.app:app", host="0.0.0.0", port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
