"""Logging setup: rich-rendered records on stderr."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def setup_logging(verbosity: int = 0) -> None:
    """Route ``searchstax_cli`` loggers to stderr; -v for INFO, -vv for DEBUG."""
    level = _LEVELS.get(verbosity, logging.DEBUG)
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger = logging.getLogger("searchstax_cli")
    logger.handlers[:] = [handler]
    logger.setLevel(level)
    logger.propagate = False
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbosity > 1 else logging.WARNING)
