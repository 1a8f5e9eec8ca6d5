"""
Movie Catalog configuration: paths, constants, field candidates.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths: override with env vars for deployment
# ---------------------------------------------------------------------------
_repo_dir = Path(__file__).resolve().parent.parent
MOVIES_FILE = Path(os.environ.get("MOVIES_DATA_FILE", str(_repo_dir / "data" / "movies_metadata.json")))
BUILD_FOLDER = Path(os.environ.get("MOVIES_BUILD_DIR", str(_repo_dir / "build")))

PORT = int(os.environ.get("PORT", "3001"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------
DEFAULT_LIMIT = 50
MAX_LIMIT = 200

# ---------------------------------------------------------------------------
# Field candidates (order matters: first present value wins)
# ---------------------------------------------------------------------------
ID_FIELDS = ["id", "movieId", "_id", "imdb_id", "imdbId", "tmdb_id"]
RATING_FIELDS = ["vote_average", "vote", "voteAverage"]
TITLE_FIELDS = ["title", "original_title"]

# Keys the resolved identifier / normalized rating are exposed under
ID_KEY = "id"
RATING_KEY = "vote_average"
