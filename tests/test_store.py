import asyncio
import threading

import pytest

from movie_catalog.data.store import CatalogStore, find_movie, paginate
from movie_catalog.data.schemas import PageRequest

from conftest import MOVIES


class CountingReader:
    """Stand-in dataset reader that counts calls and can be held mid-read."""

    def __init__(self, movies=None, exc=None):
        self.movies = movies if movies is not None else list(MOVIES)
        self.exc = exc
        self.calls = 0
        self.release = threading.Event()
        self.release.set()

    def __call__(self, path):
        self.calls += 1
        self.release.wait(timeout=5)
        if self.exc is not None:
            raise self.exc
        return self.movies


def test_concurrent_loads_share_one_read(tmp_path):
    reader = CountingReader()
    reader.release.clear()
    store = CatalogStore(tmp_path / "m.json", reader=reader)

    async def run():
        tasks = [asyncio.ensure_future(store.load()) for _ in range(10)]
        await asyncio.sleep(0.05)
        reader.release.set()
        return await asyncio.gather(*tasks)

    results = asyncio.run(run())
    assert reader.calls == 1
    assert all(r is results[0] for r in results)
    assert results[0] == MOVIES


def test_repeated_loads_are_cached(tmp_path):
    reader = CountingReader()
    store = CatalogStore(tmp_path / "m.json", reader=reader)

    async def run():
        first = await store.load()
        second = await store.load()
        return first, second

    first, second = asyncio.run(run())
    assert first is second
    assert reader.calls == 1
    # later event loops reuse the cached catalog
    asyncio.run(store.list_movies())
    assert reader.calls == 1


def test_unreadable_source_gives_permanent_empty_catalog(tmp_path):
    reader = CountingReader(exc=OSError("no such file"))
    store = CatalogStore(tmp_path / "missing.json", reader=reader)

    async def run():
        await store.load()
        page = await store.list_movies()
        await store.load()
        return page

    page = asyncio.run(run())
    assert page == {"total": 0, "count": 0, "data": []}
    assert store.is_loaded
    assert reader.calls == 1


def test_real_missing_file_is_empty(tmp_path):
    store = CatalogStore(tmp_path / "missing.json")
    assert asyncio.run(store.list_movies()) == {"total": 0, "count": 0, "data": []}


def test_unexpected_failure_propagates_to_every_caller(tmp_path):
    reader = CountingReader(exc=RuntimeError("corrupt"))
    store = CatalogStore(tmp_path / "m.json", reader=reader)

    async def run():
        return await asyncio.gather(store.load(), store.load(), return_exceptions=True)

    results = asyncio.run(run())
    assert all(isinstance(r, RuntimeError) for r in results)
    assert reader.calls == 1
    assert not store.is_loaded


def test_cancelled_waiter_does_not_cancel_shared_load(tmp_path):
    reader = CountingReader()
    reader.release.clear()
    store = CatalogStore(tmp_path / "m.json", reader=reader)

    async def run():
        doomed = asyncio.ensure_future(store.load())
        survivor = asyncio.ensure_future(store.load())
        await asyncio.sleep(0.01)
        doomed.cancel()
        reader.release.set()
        return await survivor

    assert asyncio.run(run()) == MOVIES
    assert reader.calls == 1


def test_paginate_slices_in_order():
    movies = [{"id": i, "title": f"m{i}"} for i in range(10)]
    page = paginate(movies, PageRequest.from_raw(3, 4))
    assert page["total"] == 10
    assert page["count"] == 3
    assert [m["id"] for m in page["data"]] == [4, 5, 6]


def test_paginate_past_the_end():
    movies = [{"id": i} for i in range(5)]
    page = paginate(movies, PageRequest.from_raw(10, 3))
    assert (page["total"], page["count"]) == (5, 2)
    page = paginate(movies, PageRequest.from_raw(10, 50))
    assert page == {"total": 5, "count": 0, "data": []}


def test_paginate_does_not_mutate_catalog():
    movies = [{"id": 1, "vote": 80}]
    paginate(movies, PageRequest())
    assert movies == [{"id": 1, "vote": 80}]


def test_paginate_handles_non_object_entries():
    page = paginate([None, {"id": 1}], PageRequest())
    assert page["total"] == 2
    assert page["data"][0] == {"id": None, "title": "", "tagline": "", "vote_average": 0.0}


def test_find_by_numeric_id_as_string():
    movie = find_movie(MOVIES, "862")
    assert movie["title"] == "Toy Story"
    assert movie["id"] == 862
    assert movie["genres"] == [{"id": 16, "name": "Animation"}]


def test_find_by_fallback_identifier_field():
    movie = find_movie(MOVIES, "15602")
    assert movie["id"] == "15602"
    assert movie["vote_average"] == 6.5


def test_find_by_title_when_no_identifier_matches():
    movie = find_movie(MOVIES, "inception")
    assert movie["id"] == "tt1375666"
    assert movie["vote_average"] == 8.3


def test_first_record_matching_id_or_title_wins():
    movies = [{"id": 1, "title": "42"}, {"id": 42, "title": "Other"}]
    # first record matching either rule wins
    assert find_movie(movies, "42")["id"] == 1


def test_record_without_identifier_found_by_title():
    movie = find_movie(MOVIES, "No Id Here")
    assert movie["id"] is None
    assert movie["vote_average"] == 0.0


def test_not_found_returns_none():
    assert find_movie(MOVIES, "does-not-exist-123") is None


def test_get_movie_through_store(movies_file):
    store = CatalogStore(movies_file)
    assert asyncio.run(store.get_movie("abc"))["id"] == "abc"
