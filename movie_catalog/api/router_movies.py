"""
Movie endpoints: paginated list + detail by id.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from movie_catalog.data.store import CatalogStore
from movie_catalog.data.normalize import sanitize_for_json
from movie_catalog.api.dependencies import get_store
from movie_catalog.api.response_models import ErrorResponse, MovieListResponse

router = APIRouter(prefix="/api/movies", tags=["movies"])


@router.get("", response_model=MovieListResponse)
async def list_movies(
    limit: Optional[str] = Query(None, description="Page size (default 50, max 200)"),
    offset: Optional[str] = Query(None, description="Start index (default 0)"),
    store: CatalogStore = Depends(get_store),
):
    """Lightweight movie summaries for the list view."""
    # Raw strings on purpose: bad values are clamped, not rejected with a 422
    page = await store.list_movies(limit, offset)
    return MovieListResponse(**sanitize_for_json(page))


@router.get("/{movie_id}", responses={404: {"model": ErrorResponse}})
async def get_movie(movie_id: str, store: CatalogStore = Depends(get_store)):
    """Full movie record with normalized id and vote_average."""
    movie = await store.get_movie(movie_id)
    if movie is None:
        raise HTTPException(404, "Movie not found")
    return JSONResponse(content=sanitize_for_json(movie))
