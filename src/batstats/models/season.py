"""Season-level models: the raw ingested row and its normalized record."""

from __future__ import annotations

from typing import Mapping, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


SEASON_FIELDS: tuple[str, ...] = (
    "season",
    "first_name",
    "last_name",
    "player_link",
    "position",
    "team",
    "games_played",
    "at_bats",
    "runs",
    "hits",
    "doubles",
    "triples",
    "homeruns",
    "rbi",
    "walks",
    "strikeouts",
    "stolen_bases",
    "caught_stealing",
    "batting_average",
    "on_base_percentage",
    "slugging_percentage",
    "on_base_plus_slugging",
)


class RawSeasonRow(BaseModel):
    """One row as read from the source table, every value still text."""

    season: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    player_link: Optional[str] = None
    position: Optional[str] = None
    team: Optional[str] = None
    games_played: Optional[str] = None
    at_bats: Optional[str] = None
    runs: Optional[str] = None
    hits: Optional[str] = None
    doubles: Optional[str] = None
    triples: Optional[str] = None
    homeruns: Optional[str] = None
    rbi: Optional[str] = None
    walks: Optional[str] = None
    strikeouts: Optional[str] = None
    stolen_bases: Optional[str] = None
    caught_stealing: Optional[str] = None
    batting_average: Optional[str] = None
    on_base_percentage: Optional[str] = None
    slugging_percentage: Optional[str] = None
    on_base_plus_slugging: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Optional[str]], mapping: Mapping[str, str]) -> "RawSeasonRow":
        """Build a raw row from a CSV dict using a field -> header mapping.

        Fields missing from ``mapping`` fall back to a header named like the
        field itself. Columns absent from ``row`` stay ``None``.
        """

        data: dict[str, Optional[str]] = {}
        for field_name in SEASON_FIELDS:
            header = mapping.get(field_name, field_name)
            value = row.get(header)
            data[field_name] = None if value is None else str(value)
        return cls(**data)


class SeasonRecord(BaseModel):
    """Normalized statistics for one player in one season."""

    player_link: str = Field(..., min_length=1)
    season: int = Field(..., ge=0)
    first_name: Optional[str] = None
    last_name: str = Field(..., min_length=1)
    position: str
    team: str

    games_played: int = Field(..., ge=0)
    at_bats: int = Field(..., ge=0)
    runs: int = Field(..., ge=0)
    hits: int = Field(..., ge=0)
    doubles: int = Field(..., ge=0)
    triples: int = Field(..., ge=0)
    homeruns: int = Field(..., ge=0)
    walks: int = Field(..., ge=0)

    rbi: Optional[int] = Field(default=None, ge=0)
    strikeouts: Optional[float] = Field(default=None, ge=0.0)
    stolen_bases: Optional[int] = Field(default=None, ge=0)
    caught_stealing: Optional[int] = Field(default=None, ge=0)
    on_base_percentage: Optional[float] = None
    on_base_plus_slugging: Optional[float] = None

    batting_average: float
    slugging_percentage: float

    model_config = ConfigDict(frozen=True)

    @property
    def display_first_name(self) -> str:
        return self.first_name or "N/A"
