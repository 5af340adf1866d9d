"""Logging setup for codepoet.

Every module obtains its logger through :func:`get_logger` so that a single
call to :func:`setup_logging` controls the whole package.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "codepoet"

_configured = False


def setup_logging(level: int | str = logging.WARNING, console: Console | None = None) -> None:
    """Configure package logging with a rich handler.

    Args:
        level: Logging level name or number.
        console: Rich console to log to (defaults to stderr).
    """
    global _configured

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if not _configured:
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace."""
    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
