"""
Movie Catalog: FastAPI app factory with startup data loading.
"""
from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from movie_catalog import __version__
from movie_catalog.config import BUILD_FOLDER, MOVIES_FILE
from movie_catalog.data.store import CatalogStore
from movie_catalog.log import configure_logging
from movie_catalog.api.dependencies import set_store
from movie_catalog.api.router_meta import router as meta_router
from movie_catalog.api.router_movies import router as movies_router

LOGGER = logging.getLogger("movie_catalog.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the catalog at startup so the first request doesn't pay for it."""
    store = CatalogStore(app.state.movies_file)
    set_store(store)
    await store.load()
    LOGGER.info("Movies API ready: %d movies from %s", store.total(), store.path)
    yield
    set_store(None)


def _register_error_handlers(app: FastAPI, index_html: Path | None) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        # Client-side routes of the built frontend resolve to its index.html
        if (
            exc.status_code == 404
            and index_html is not None
            and request.method == "GET"
            and not request.url.path.startswith("/api")
        ):
            return FileResponse(str(index_html))
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        LOGGER.exception("Unhandled error in %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(movies_file: Path = MOVIES_FILE, build_dir: Path = BUILD_FOLDER) -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Movie Catalog API",
        description="Paginated and by-id queries over a static movie dataset",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.movies_file = Path(movies_file)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        latency_ms = int((time.perf_counter() - start) * 1000)
        LOGGER.info("%s %s %d %dms", request.method, request.url.path, response.status_code, latency_ms)
        return response

    app.include_router(meta_router)
    app.include_router(movies_router)

    # Serve a production frontend build if one is present
    build_dir = Path(build_dir)
    index_html = build_dir / "index.html"
    if index_html.is_file():
        app.mount("/", StaticFiles(directory=str(build_dir), html=True), name="static")
        _register_error_handlers(app, index_html)
    else:
        _register_error_handlers(app, None)

    return app


app = create_app()
