"""Canned leaderboard reports offered by the command line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from batstats.config.metrics import Metric, get_metric


@dataclass(frozen=True)
class ReportSection:
    metric: Metric
    title: str
    show_seasons_played: bool = False


@dataclass(frozen=True)
class ReportBundle:
    name: str
    description: str
    sections: Tuple[ReportSection, ...]


_REPORTS: Dict[str, ReportBundle] = {
    "homeruns": ReportBundle(
        name="homeruns",
        description="Show home run records (single season and career)",
        sections=(
            ReportSection(metric=get_metric("homeruns"), title="Top {k} home runs in a season"),
            ReportSection(
                metric=get_metric("total_homeruns"),
                title="Top {k} homeruns in a career",
                show_seasons_played=True,
            ),
        ),
    ),
    "seasons": ReportBundle(
        name="seasons",
        description="Show single season records",
        sections=(ReportSection(metric=get_metric("hits"), title="Top {k} hits in a season"),),
    ),
    "careers": ReportBundle(
        name="careers",
        description="Show career records",
        sections=(
            ReportSection(metric=get_metric("total_games_played"), title="Top {k} games played in a career"),
        ),
    ),
}


def iter_reports() -> Iterable[ReportBundle]:
    return _REPORTS.values()


def get_report(name: str) -> ReportBundle:
    key = name.strip().lower()
    if key not in _REPORTS:
        raise KeyError(f"No report configured for name={name!r}")
    return _REPORTS[key]
