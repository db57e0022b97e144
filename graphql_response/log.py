import logging
import sys
from typing import IO

from .settings import settings

_handler: logging.Handler | None = None


def configure_logging(
    level: str | int | None = None,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Calling it again replaces the handler installed by the previous call.
    """
    global _handler

    package_logger = logging.getLogger('graphql_response')
    if _handler is not None:
        package_logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream or sys.stderr)
    _handler.setFormatter(logging.Formatter(fmt or settings.logging.format))
    package_logger.addHandler(_handler)

    level = level if level is not None else settings.logging.level
    package_logger.setLevel(level.upper() if isinstance(level, str) else level)
    return package_logger
