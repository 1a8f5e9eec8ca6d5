"""
Field resolution, rating normalization, summary/detail views, JSON sanitizing.
"""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping, Optional

from movie_catalog.config import ID_FIELDS, RATING_FIELDS, TITLE_FIELDS, ID_KEY, RATING_KEY

_ONE_DECIMAL = Decimal("0.1")
_NO_FRACTION = 2.0 ** 53


# ---------------------------------------------------------------------------
# Field resolution
# ---------------------------------------------------------------------------

def _fields(record: Any) -> Mapping[str, Any]:
    """Records that aren't JSON objects resolve as if they had no fields."""
    return record if isinstance(record, Mapping) else {}


def resolve_field(record: Any, candidates: list[str], default: Any = None) -> Any:
    """Return the first non-null value among candidate keys, in order."""
    fields = _fields(record)
    for key in candidates:
        value = fields.get(key)
        if value is not None:
            return value
    return default


def resolve_identifier(record: Any) -> Any:
    return resolve_field(record, ID_FIELDS)


def resolve_title(record: Any) -> Any:
    return resolve_field(record, TITLE_FIELDS, "")


def resolve_tagline(record: Any) -> Any:
    return resolve_field(record, ["tagline"], "")


def identifier_to_str(value: Any) -> Optional[str]:
    """Stringify an identifier the way it reads in JSON (``12`` not ``12.0``)."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# ---------------------------------------------------------------------------
# Rating normalization
# ---------------------------------------------------------------------------

def _to_number(value: Any) -> float:
    """Coerce to a finite float; anything non-numeric becomes 0."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            # integer literal beyond float range
            return 0.0
    elif isinstance(value, str):
        try:
            number = float(value.strip()) if value.strip() else 0.0
        except ValueError:
            return 0.0
    else:
        return 0.0
    return number if math.isfinite(number) else 0.0


def normalize_rating(value: Any) -> float:
    """Map a raw rating onto the 0-10 scale with one decimal digit.

    Values above 10 are taken to be on a 0-100 scale. The division happens in
    float and rounding is half away from zero on the exact binary value, so
    ``"7.25"`` becomes ``7.3`` but ``84.5`` (8.4499...) becomes ``8.4``.
    """
    number = _to_number(value)
    if number > 10:
        number = number / 10
    # Floats this large carry no fractional digits to round
    if abs(number) >= _NO_FRACTION:
        return number
    return float(Decimal(number).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def record_rating(record: Any) -> float:
    return normalize_rating(resolve_field(record, RATING_FIELDS, 0))


# ---------------------------------------------------------------------------
# Views
# ---------------------------------------------------------------------------

def summary_view(record: Any) -> dict[str, Any]:
    """Lightweight list-view projection of a record."""
    return {
        ID_KEY: resolve_identifier(record),
        "title": resolve_title(record),
        "tagline": resolve_tagline(record),
        RATING_KEY: record_rating(record),
    }


def detail_view(record: Any) -> dict[str, Any]:
    """Shallow copy of every field with identifier and rating overridden."""
    result = dict(_fields(record))
    result[ID_KEY] = resolve_identifier(record)
    result[RATING_KEY] = record_rating(record)
    return result


def title_matches(record: Any, wanted: str) -> bool:
    """Case-insensitive equality on the record's own ``title`` field."""
    title = _fields(record).get("title")
    return isinstance(title, str) and title.casefold() == wanted.casefold()


# ---------------------------------------------------------------------------
# JSON safety
# ---------------------------------------------------------------------------

def sanitize_for_json(obj):
    """Recursively replace NaN/Infinity floats (accepted by json.loads) with None."""
    if isinstance(obj, dict):
        return {str(k) if not isinstance(k, str) else k: sanitize_for_json(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [sanitize_for_json(v) for v in obj]
    if isinstance(obj, float) and (math.isnan(obj) or math.isinf(obj)):
        return None
    return obj
