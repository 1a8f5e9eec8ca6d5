"""
Logging setup shared by the API server and the CLI.
"""
from __future__ import annotations

import logging

from movie_catalog.config import LOG_LEVEL

LOG_FORMAT = "[movies-api] %(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Attach a single stream handler to the package logger (idempotent)."""
    logger = logging.getLogger("movie_catalog")
    logger.setLevel(level)
    if not any(getattr(h, "_movie_catalog", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._movie_catalog = True
        logger.addHandler(handler)
    return logger
