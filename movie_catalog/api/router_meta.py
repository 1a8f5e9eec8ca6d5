"""
Meta endpoints: ping, health.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from movie_catalog.data.store import CatalogStore
from movie_catalog.api.dependencies import get_store
from movie_catalog.api.response_models import HealthResponse

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/ping", response_class=PlainTextResponse)
def ping():
    return "pong"


@router.get("/health", response_model=HealthResponse)
def health(store: CatalogStore = Depends(get_store)):
    return HealthResponse(
        status="ok",
        loaded=store.is_loaded,
        movies=store.total(),
        source=str(store.path),
    )
