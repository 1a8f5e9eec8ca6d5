"""
Dataset reading and top-level shape normalization.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from movie_catalog.config import MOVIES_FILE

LOGGER = logging.getLogger("movie_catalog.loader")

Record = dict[str, Any]


def coerce_records(payload: Any) -> list[Any]:
    """Turn the parsed top-level JSON value into an ordered record list.

    An array is used as-is; an object keyed by id yields its values in
    document order.
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        return list(payload.values())
    raise ValueError(
        f"Expected a JSON array or object at top level, got {type(payload).__name__}"
    )


def read_catalog(path: Path = MOVIES_FILE) -> list[Any]:
    """Read and parse the dataset file. Raises OSError / ValueError on bad input."""
    raw = Path(path).read_text(encoding="utf-8")
    return coerce_records(json.loads(raw))


def load_catalog_or_empty(path: Path = MOVIES_FILE, reader=read_catalog) -> list[Any]:
    """Read the dataset, falling back to an empty catalog if the source is unusable."""
    try:
        movies = reader(path)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors
        LOGGER.error("Failed to load movies file at %s: %s", path, e)
        return []
    LOGGER.info("Loaded %d movies from %s", len(movies), path)
    return movies
