from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from movie_catalog.main import create_app

MOVIES = [
    {"id": 862, "imdb_id": "tt0114709", "title": "Toy Story", "tagline": "", "vote_average": 7.7,
     "genres": [{"id": 16, "name": "Animation"}], "runtime": 81},
    {"movieId": "15602", "title": "Grumpier Old Men", "tagline": "Still Yelling.", "vote": 65},
    {"_id": "abc", "original_title": "Waiting to Exhale", "voteAverage": "6.15"},
    {"imdbId": "tt1375666", "title": "Inception", "tagline": "Your mind is the scene of the crime.",
     "vote_average": 83, "budget": None},
    {"title": "No Id Here", "vote_average": "not a number"},
]


def write_json(path: Path, payload) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def movies_file(tmp_path) -> Path:
    return write_json(tmp_path / "movies.json", MOVIES)


@pytest.fixture
def client(movies_file, tmp_path):
    app = create_app(movies_file=movies_file, build_dir=tmp_path / "no-build")
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
