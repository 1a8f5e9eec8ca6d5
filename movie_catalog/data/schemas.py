"""
Pagination schema for list queries.
"""
from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Any, Optional

from movie_catalog.config import DEFAULT_LIMIT, MAX_LIMIT


def _parse_number(value: Any) -> Optional[float]:
    """Parse a query-string style value; None when it isn't a number (NaN included)."""
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        else:
            number = float(str(value).strip())
    except (ValueError, OverflowError):
        return None
    return None if math.isnan(number) else number


@dataclass(frozen=True)
class PageRequest:
    """A clamped (limit, offset) window over the catalog."""
    limit: int = DEFAULT_LIMIT
    offset: int = 0

    @classmethod
    def from_raw(cls, limit: Any = None, offset: Any = None) -> "PageRequest":
        """Coerce raw values into a valid window; never fails.

        limit: absent, non-numeric or <= 0 -> DEFAULT_LIMIT, else [1, MAX_LIMIT]
        offset: absent, non-numeric -> 0, else >= 0 (infinite -> past the end)
        """
        n = _parse_number(limit)
        if n is None or n <= 0:
            eff_limit = DEFAULT_LIMIT
        elif n >= MAX_LIMIT:
            eff_limit = MAX_LIMIT
        else:
            eff_limit = max(1, int(n))

        o = _parse_number(offset)
        if o is None or o <= 0:
            eff_offset = 0
        elif math.isinf(o):
            eff_offset = sys.maxsize
        else:
            eff_offset = int(o)

        return cls(limit=eff_limit, offset=eff_offset)

    @property
    def stop(self) -> int:
        return self.offset + self.limit
