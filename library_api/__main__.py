"""Arranque del servidor: python -m library_api (o el script library-api)."""

import logging
import sys

import uvicorn

from library_api.config import get_settings
from library_api.errors import ConfigurationError
from library_api.observability import LOG_FORMAT, setup_logging

logger = logging.getLogger("library_api")


def main() -> None:
    try:
        settings = get_settings()
    except ConfigurationError as e:
        logging.basicConfig(level=logging.ERROR, format=LOG_FORMAT)
        logger.error("No se puede arrancar: %s", e)
        sys.exit(1)

    setup_logging(settings.log_level)
    from library_api.main import app

    logger.info("listening on port: %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
