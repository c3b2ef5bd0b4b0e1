"""Career summary model derived from a player's season records."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class CareerRecord(BaseModel):
    """Totals for one player across every season sharing a ``player_link``."""

    player_link: str = Field(..., min_length=1)
    first_name: str
    last_name: str
    first_season: int
    last_season: int
    seasons_played: int = Field(..., ge=1)
    positions: Tuple[str, ...]
    teams: Tuple[str, ...]

    total_games_played: int = Field(..., ge=0)
    total_at_bats: int = Field(..., ge=0)
    total_runs: int = Field(..., ge=0)
    total_hits: int = Field(..., ge=0)
    total_doubles: int = Field(..., ge=0)
    total_triples: int = Field(..., ge=0)
    total_homeruns: int = Field(..., ge=0)
    total_walks: int = Field(..., ge=0)
    total_rbi: int = Field(..., ge=0)
    total_strikeouts: float = Field(..., ge=0.0)
    total_stolen_bases: int = Field(..., ge=0)
    total_caught_stealing: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def positions_label(self) -> str:
        return ", ".join(self.positions)

    @property
    def teams_label(self) -> str:
        return ", ".join(self.teams)
