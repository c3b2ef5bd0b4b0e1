"""Canonical season and career models shared across the pipeline."""

from .career import CareerRecord
from .season import RawSeasonRow, SeasonRecord

__all__ = [
    "CareerRecord",
    "RawSeasonRow",
    "SeasonRecord",
]
