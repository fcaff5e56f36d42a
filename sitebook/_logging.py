"""Logging setup for the sitebook console command."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

LOG_FORMAT = "%(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Route sitebook log records through a Rich console handler.

    Parameters
    ----------
    level : str, optional
        Logging level name applied to the ``sitebook`` logger hierarchy.
    """
    handler = RichHandler(show_time=False, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger = logging.getLogger("sitebook")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False


__all__ = ["configure_logging"]
