"""Data loading, normalization, and in-memory catalog lookups."""
from .loader import coerce_records, read_catalog, load_catalog_or_empty
from .store import CatalogStore, paginate, find_movie
from .schemas import PageRequest
from .normalize import normalize_rating, resolve_identifier, summary_view, detail_view
