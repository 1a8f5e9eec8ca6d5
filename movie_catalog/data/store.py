"""
CatalogStore: in-memory movie catalog with list/detail lookups.

Loaded once (at startup or on first query), read on every request.
Concurrent first callers share a single pending load instead of each
reading the file.
"""
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Optional

from movie_catalog.config import MOVIES_FILE
from movie_catalog.data.loader import load_catalog_or_empty, read_catalog
from movie_catalog.data.normalize import (
    detail_view,
    identifier_to_str,
    resolve_identifier,
    summary_view,
    title_matches,
)
from movie_catalog.data.schemas import PageRequest


# ---------------------------------------------------------------------------
# Pure lookups over a loaded catalog
# ---------------------------------------------------------------------------

def paginate(movies: list[Any], page: PageRequest) -> dict[str, Any]:
    """Summary views for one page plus total/count."""
    data = [summary_view(m) for m in movies[page.offset:page.stop]]
    return {"total": len(movies), "count": len(data), "data": data}


def find_movie(movies: list[Any], movie_id: Any) -> Optional[dict[str, Any]]:
    """First record whose resolved id (or, failing that, title) matches.

    The title fallback is a loose heuristic: duplicate titles resolve to
    whichever comes first in the catalog.
    """
    wanted = str(movie_id)
    for movie in movies:
        if identifier_to_str(resolve_identifier(movie)) == wanted or title_matches(movie, wanted):
            return detail_view(movie)
    return None


class CatalogStore:
    """Process-lifetime owner of the movie catalog."""

    def __init__(self, path: Path = MOVIES_FILE, reader=read_catalog) -> None:
        self.path = Path(path)
        self._reader = reader
        self._movies: Optional[list[Any]] = None
        self._pending: Optional[asyncio.Future] = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def load(self) -> list[Any]:
        """Load the catalog once; every caller resolves to the same list.

        A bad source yields an empty catalog that stays cached. Waiters are
        shielded so one cancelled request doesn't cancel the shared read.
        """
        if self._movies is not None:
            return self._movies
        if self._pending is None:
            self._pending = asyncio.ensure_future(asyncio.to_thread(self._read))
        return await asyncio.shield(self._pending)

    def _read(self) -> list[Any]:
        movies = load_catalog_or_empty(self.path, self._reader)
        self._movies = movies
        return movies

    @property
    def is_loaded(self) -> bool:
        return self._movies is not None

    def total(self) -> int:
        return len(self._movies) if self._movies is not None else 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def list_movies(self, limit: Any = None, offset: Any = None) -> dict[str, Any]:
        """Paginated summaries; raw limit/offset are coerced, never rejected."""
        movies = await self.load()
        return paginate(movies, PageRequest.from_raw(limit, offset))

    async def get_movie(self, movie_id: Any) -> Optional[dict[str, Any]]:
        """Full record for an id (or title), or None when nothing matches."""
        movies = await self.load()
        return find_movie(movies, movie_id)
