"""Top-K leaderboards over season and career records."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, TypeVar, Union

from batstats.aggregate import aggregate_store
from batstats.config.metrics import Metric, get_metric
from batstats.models import CareerRecord, SeasonRecord
from batstats.stores import CareerStore, SeasonStore


logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TOP_K = 10


class InsufficientDataError(ValueError):
    """Raised when fewer records exist than the requested rank count."""

    def __init__(self, requested: int, available: int):
        super().__init__(f"requested top {requested} but only {available} records are available")
        self.requested = requested
        self.available = available


def top_k(
    items: Sequence[T],
    metric: Callable[[T], Union[int, float]],
    k: int,
    *,
    descending: bool = True,
) -> List[T]:
    """Return the ``k`` best items ordered by ``metric``.

    The sort is stable, so items with equal metric values keep their input
    order. Asking for more items than exist raises
    :class:`InsufficientDataError` instead of returning a shorter list.
    """

    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    if k > len(items):
        raise InsufficientDataError(requested=k, available=len(items))
    ranked = sorted(items, key=metric, reverse=descending)
    return ranked[:k]


class StatsService:
    """Query entry points over one loaded season store."""

    def __init__(self, seasons: SeasonStore):
        self._seasons = seasons
        self._careers: Optional[CareerStore] = None

    @property
    def seasons(self) -> SeasonStore:
        return self._seasons

    def careers(self) -> CareerStore:
        if self._careers is None:
            self._careers = aggregate_store(self._seasons)
        return self._careers

    def rank_seasons(self, metric: Union[str, Metric], k: int = DEFAULT_TOP_K) -> List[SeasonRecord]:
        resolved = get_metric(metric, scope="season")
        logger.debug("Ranking %s seasons by %s", len(self._seasons), resolved.key)
        return top_k(self._seasons.records, resolved.value, k)

    def rank_careers(self, metric: Union[str, Metric], k: int = DEFAULT_TOP_K) -> List[CareerRecord]:
        resolved = get_metric(metric, scope="career")
        careers = self.careers()
        logger.debug("Ranking %s careers by %s", len(careers), resolved.key)
        return top_k(careers.records, resolved.value, k)
