"""Fixed-width text rendering for ranked leaderboards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence, Union

from batstats.config.reports import ReportSection
from batstats.models import CareerRecord, SeasonRecord


Ranked = Union[SeasonRecord, CareerRecord]


@dataclass(frozen=True)
class Column:
    header: str
    width: int
    getter: Callable[[int, Ranked], object]


def _rank(rank: int, _: Ranked) -> object:
    return rank


def _first_name(_: int, record: Ranked) -> object:
    if isinstance(record, SeasonRecord):
        return record.display_first_name
    return record.first_name


def _field(name: str) -> Callable[[int, Ranked], object]:
    return lambda _, record: getattr(record, name)


def section_columns(section: ReportSection) -> tuple[Column, ...]:
    """Return the column layout for one report section."""

    metric = section.metric
    columns = [
        Column("Rank", 4, _rank),
        Column("First Name", 15, _first_name),
        Column("Last Name", 15, _field("last_name")),
    ]
    if metric.scope == "season":
        columns += [
            Column("Team", 6, _field("team")),
            Column("Season", 8, _field("season")),
        ]
    else:
        columns += [
            Column("From", 6, _field("first_season")),
            Column("To", 6, _field("last_season")),
        ]
        if section.show_seasons_played:
            columns.append(Column("Total", 6, _field("seasons_played")))
    columns.append(Column(metric.label, 3, lambda _, record: metric.value(record)))
    return tuple(columns)


def _rule_width(section: ReportSection) -> int:
    if section.metric.scope == "season":
        return 60
    return 67 if section.show_seasons_played else 63


def _format_line(columns: Sequence[Column], values: Sequence[object]) -> str:
    cells = [f"{str(value):<{column.width}}" for column, value in zip(columns, values)]
    return " ".join(cells).rstrip()


def render_table(section: ReportSection, rows: Sequence[Ranked]) -> str:
    columns = section_columns(section)
    lines = [
        section.title.format(k=len(rows)) + ":",
        _format_line(columns, [column.header for column in columns]),
        "-" * _rule_width(section),
    ]
    for rank, record in enumerate(rows, start=1):
        lines.append(_format_line(columns, [column.getter(rank, record) for column in columns]))
    return "\n".join(lines)
