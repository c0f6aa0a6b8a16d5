from __future__ import annotations

import logging

import uvicorn

from ...env import settings_from_env
from ...logging_setup import configure_logging
from .app import create_app

logger = logging.getLogger(__name__)


def serve() -> None:
    """Run the inspector web app with settings taken from the environment."""
    settings = settings_from_env()
    configure_logging(settings.log_level)

    app = create_app(settings)
    logger.info("JWT Inspector listening at %s", settings.base_url)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    serve()
