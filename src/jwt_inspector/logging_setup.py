import logging
from logging import StreamHandler
from typing import Union

LOGGER_NAME = "jwt_inspector"

logging_format = "%(asctime)s [%(levelname)s]|[%(process)d]| %(name)s: %(message)s"
time_logging_format = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def get_stream_handler(level: int) -> StreamHandler:  # type: ignore[type-arg]
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter(logging_format, time_logging_format))
    return stream_handler


def configure_logging(level: Union[str, int] = "INFO") -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Calling it again only updates the level.
    """
    resolved = _resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolved)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(resolved)
        return logger

    logger.addHandler(get_stream_handler(resolved))
    logger.propagate = False
    return logger
