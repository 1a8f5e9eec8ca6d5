"""Movie catalog API: lookup and normalization over a static JSON dataset."""

__version__ = "1.0.0"
