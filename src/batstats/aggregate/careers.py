"""Fold season records into per-player career summaries."""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from batstats.models import CareerRecord, SeasonRecord
from batstats.stores import CareerStore, SeasonStore


logger = logging.getLogger(__name__)


def group_by_player(seasons: Sequence[SeasonRecord]) -> Dict[str, List[SeasonRecord]]:
    """Partition seasons by ``player_link`` keeping first-appearance order."""

    groups: Dict[str, List[SeasonRecord]] = {}
    for season in seasons:
        groups.setdefault(season.player_link, []).append(season)
    return groups


def _unique_in_order(values: Sequence[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))


def build_career(seasons: Sequence[SeasonRecord]) -> CareerRecord:
    """Summarize one player's seasons; ``seasons`` must be non-empty."""

    if not seasons:
        raise ValueError("cannot build a career from zero seasons")
    first = seasons[0]
    years = [s.season for s in seasons]
    return CareerRecord(
        player_link=first.player_link,
        first_name=first.display_first_name,
        last_name=first.last_name,
        first_season=min(years),
        last_season=max(years),
        seasons_played=len(seasons),
        positions=_unique_in_order([s.position for s in seasons]),
        teams=_unique_in_order([s.team for s in seasons]),
        total_games_played=sum(s.games_played for s in seasons),
        total_at_bats=sum(s.at_bats for s in seasons),
        total_runs=sum(s.runs for s in seasons),
        total_hits=sum(s.hits for s in seasons),
        total_doubles=sum(s.doubles for s in seasons),
        total_triples=sum(s.triples for s in seasons),
        total_homeruns=sum(s.homeruns for s in seasons),
        total_walks=sum(s.walks for s in seasons),
        # Absent optional stats count as zero here only.
        total_rbi=sum(s.rbi or 0 for s in seasons),
        total_strikeouts=sum((s.strikeouts or 0.0 for s in seasons), 0.0),
        total_stolen_bases=sum(s.stolen_bases or 0 for s in seasons),
        total_caught_stealing=sum(s.caught_stealing or 0 for s in seasons),
    )


def aggregate(seasons: Sequence[SeasonRecord]) -> Dict[str, CareerRecord]:
    groups = group_by_player(seasons)
    logger.info("Found %s unique players across %s seasons", len(groups), len(seasons))
    return {link: build_career(group) for link, group in groups.items()}


def aggregate_store(store: SeasonStore) -> CareerStore:
    return CareerStore(by_link=aggregate(store.records))
