#!/usr/bin/env python3
"""
Movie Catalog CLI: API server plus quick catalog queries from the shell.

USAGE:
  python -m movie_catalog.cli serve                         # Start API server
  python -m movie_catalog.cli serve --port 8000 --reload

  python -m movie_catalog.cli list                          # First 50 movies as JSON
  python -m movie_catalog.cli list --limit 10 --offset 20
  python -m movie_catalog.cli show 862                      # One movie by id (or title)
  python -m movie_catalog.cli show "Toy Story" --data ./movies.json
"""
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from movie_catalog.config import MOVIES_FILE, PORT
from movie_catalog.data.normalize import sanitize_for_json
from movie_catalog.data.store import CatalogStore
from movie_catalog.log import configure_logging


def _print_json(data) -> None:
    print(json.dumps(sanitize_for_json(data), indent=2, ensure_ascii=False))


def cmd_serve(args) -> int:
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Movie Catalog API on http://{args.host}:{args.port} ...")
    print("  - GET /api/movies")
    print("  - GET /api/movies/{id}")
    uvicorn.run("movie_catalog.main:app", host=args.host, port=args.port, reload=args.reload,
                timeout_keep_alive=65)
    return 0


def cmd_list(args) -> int:
    """Print one page of movie summaries."""
    store = CatalogStore(Path(args.data))
    _print_json(asyncio.run(store.list_movies(args.limit, args.offset)))
    return 0


def cmd_show(args) -> int:
    """Print a full movie record."""
    store = CatalogStore(Path(args.data))
    movie = asyncio.run(store.get_movie(args.movie_id))
    if movie is None:
        _print_json({"error": "Movie not found"})
        return 1
    _print_json(movie)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Movie Catalog: browse a static movie dataset",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # serve subcommand
    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Bind address (default 0.0.0.0)")
    serve_parser.add_argument("--port", type=int, default=PORT, help=f"Port (default {PORT})")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    # list subcommand: limit/offset stay raw so they're clamped like the API does
    list_parser = subparsers.add_parser("list", help="List movies (paginated)")
    list_parser.add_argument("--limit", help="Page size (default 50, max 200)")
    list_parser.add_argument("--offset", help="Start index (default 0)")
    list_parser.add_argument("--data", default=str(MOVIES_FILE), help="Dataset JSON file")
    list_parser.set_defaults(func=cmd_list)

    # show subcommand
    show_parser = subparsers.add_parser("show", help="Show one movie by id or title")
    show_parser.add_argument("movie_id", help="Movie id (any supported id field) or exact title")
    show_parser.add_argument("--data", default=str(MOVIES_FILE), help="Dataset JSON file")
    show_parser.set_defaults(func=cmd_show)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    configure_logging()
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
