"""
FastAPI dependencies: CatalogStore singleton.
"""
from __future__ import annotations

from fastapi import HTTPException

from movie_catalog.data.store import CatalogStore

# ---------------------------------------------------------------------------
# Global store singleton (set during startup)
# ---------------------------------------------------------------------------
_store: CatalogStore | None = None


def set_store(store: CatalogStore | None) -> None:
    global _store
    _store = store


def get_store() -> CatalogStore:
    if _store is None:
        raise HTTPException(503, "Server not initialized yet")
    return _store
