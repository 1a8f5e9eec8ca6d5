"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    loaded: bool
    movies: int
    source: str


class MovieSummary(BaseModel):
    id: Any = None  # whichever id field the record carries, untouched
    title: Any = ""
    tagline: Any = ""
    vote_average: float = 0.0


class MovieListResponse(BaseModel):
    total: int
    count: int
    data: list[MovieSummary]


class ErrorResponse(BaseModel):
    error: str
