"""Input adapters that normalize raw season data."""

from .normalize import MISSING_SENTINEL, NormalizationError, normalize, to_raw
from .seasons import (
    DEFAULT_SEASON_MAPPING,
    LoadReport,
    MissingInputError,
    load_season_csv,
    load_store_from_csv,
    normalize_rows,
)

__all__ = [
    "DEFAULT_SEASON_MAPPING",
    "LoadReport",
    "MISSING_SENTINEL",
    "MissingInputError",
    "NormalizationError",
    "load_season_csv",
    "load_store_from_csv",
    "normalize",
    "normalize_rows",
    "to_raw",
]
