"""Logging setup shared by all tools."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_LOG_FORMAT = "%(message)s"
_DATE_FORMAT = "[%X]"


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger.

    Args:
        name: Logger name, usually ``__name__``

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def setup_logger(name: str, level: str = "INFO", console: Optional[Console] = None) -> logging.Logger:
    """
    Configure logging for a tool.

    The handler is attached to the top-level package of ``name`` so that
    library modules logging through ``get_logger(__name__)`` share it.

    Args:
        name: Logger name of the calling module
        level: Log level name
        console: Rich console to log to (stderr if not specified)

    Returns:
        Configured package logger
    """
    package_logger = logging.getLogger(name.split(".")[0])
    package_logger.setLevel(level.upper())

    # Calling twice must not duplicate output
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
    package_logger.addHandler(handler)
    package_logger.propagate = False

    return package_logger
