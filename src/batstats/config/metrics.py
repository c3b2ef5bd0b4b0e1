"""Ranking metrics supported for season and career leaderboards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Literal, Optional, Union

from batstats.models import CareerRecord, SeasonRecord


Scope = Literal["season", "career"]


@dataclass(frozen=True)
class Metric:
    key: str
    scope: Scope
    label: str
    attribute: str

    def value(self, record: Union[SeasonRecord, CareerRecord]) -> Union[int, float]:
        return getattr(record, self.attribute)


_METRICS: Dict[str, Metric] = {
    "homeruns": Metric(key="homeruns", scope="season", label="HR", attribute="homeruns"),
    "hits": Metric(key="hits", scope="season", label="Hits", attribute="hits"),
    "total_homeruns": Metric(
        key="total_homeruns",
        scope="career",
        label="Home runs",
        attribute="total_homeruns",
    ),
    "total_games_played": Metric(
        key="total_games_played",
        scope="career",
        label="Games Played",
        attribute="total_games_played",
    ),
}


def iter_metrics(scope: Optional[Scope] = None) -> Iterable[Metric]:
    """Return configured metrics, optionally limited to one scope."""

    return [metric for metric in _METRICS.values() if scope is None or metric.scope == scope]


def get_metric(key: Union[str, Metric], scope: Optional[Scope] = None) -> Metric:
    """Resolve a metric by key, raising KeyError if unknown or out of scope."""

    if isinstance(key, Metric):
        metric = key
    else:
        normalized = key.strip().lower()
        if normalized not in _METRICS:
            raise KeyError(f"No ranking metric configured for key={key!r}")
        metric = _METRICS[normalized]
    if scope is not None and metric.scope != scope:
        raise KeyError(f"Metric {metric.key!r} ranks {metric.scope} records, not {scope} records")
    return metric
