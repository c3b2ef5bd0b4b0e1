"""Immutable in-memory collections of season and career records."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple

from batstats.models import CareerRecord, SeasonRecord


@dataclass(frozen=True)
class SeasonStore:
    """Ordered season records in the order they were ingested."""

    records: Tuple[SeasonRecord, ...] = ()

    @classmethod
    def from_records(cls, records: Iterable[SeasonRecord]) -> "SeasonStore":
        return cls(records=tuple(records))

    def __iter__(self) -> Iterator[SeasonRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, index: int) -> SeasonRecord:
        return self.records[index]

    def for_player(self, player_link: str) -> Tuple[SeasonRecord, ...]:
        return tuple(record for record in self.records if record.player_link == player_link)


@dataclass(frozen=True)
class CareerStore:
    """Career records keyed by ``player_link`` in first-appearance order."""

    by_link: Mapping[str, CareerRecord] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "by_link", MappingProxyType(dict(self.by_link)))

    def __iter__(self) -> Iterator[CareerRecord]:
        return iter(self.by_link.values())

    def __len__(self) -> int:
        return len(self.by_link)

    def __contains__(self, player_link: object) -> bool:
        return player_link in self.by_link

    @property
    def records(self) -> Tuple[CareerRecord, ...]:
        return tuple(self.by_link.values())

    def get(self, player_link: str) -> Optional[CareerRecord]:
        return self.by_link.get(player_link)
