"""Helpers to load season CSVs and emit normalized season stores."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Sequence, Tuple

from batstats.ingest.normalize import NormalizationError, normalize
from batstats.models import RawSeasonRow, SeasonRecord
from batstats.models.season import SEASON_FIELDS
from batstats.stores import SeasonStore


logger = logging.getLogger(__name__)

# The source file names its player key column "link".
DEFAULT_SEASON_MAPPING: dict[str, str] = {field: field for field in SEASON_FIELDS}
DEFAULT_SEASON_MAPPING["player_link"] = "link"

DEFAULT_MAX_DIAGNOSTICS = 5


class MissingInputError(FileNotFoundError):
    """Raised when the configured season data file does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"{path} not found")
        self.path = path


@dataclass(frozen=True)
class LoadReport:
    total_rows: int
    loaded_rows: int
    error_count: int
    diagnostics: List[str]


def load_season_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[RawSeasonRow]:
    if not path.exists():
        raise MissingInputError(path)
    resolved = dict(DEFAULT_SEASON_MAPPING)
    if mapping:
        resolved.update(mapping)
    # Undecodable bytes survive as surrogates so normalize() can reject just that row.
    with path.open(newline="", encoding="utf-8", errors="surrogateescape") as f:
        reader = csv.DictReader(f)
        rows = [RawSeasonRow.from_mapping(row, resolved) for row in reader]
    logger.info("Read %s raw season rows from %s", len(rows), path)
    return rows


def normalize_rows(
    rows: Sequence[RawSeasonRow],
    *,
    max_diagnostics: int = DEFAULT_MAX_DIAGNOSTICS,
    first_line: int = 2,
) -> Tuple[SeasonStore, LoadReport]:
    """Normalize every row, dropping malformed ones.

    ``first_line`` is the file line number of ``rows[0]``; the default skips a
    single header line. Only the first ``max_diagnostics`` failures are kept
    as messages, but all of them are counted.
    """

    records: List[SeasonRecord] = []
    diagnostics: List[str] = []
    error_count = 0
    for offset, row in enumerate(rows):
        line = first_line + offset
        try:
            records.append(normalize(row, line=line))
        except NormalizationError as exc:
            error_count += 1
            if error_count <= max_diagnostics:
                diagnostics.append(str(exc))
                logger.warning("Skipping malformed season row: %s", exc)
            else:
                logger.debug("Skipping malformed season row: %s", exc)

    if error_count:
        logger.warning("Dropped %s of %s season rows", error_count, len(rows))
    logger.info("Normalized %s season records", len(records))

    report = LoadReport(
        total_rows=len(rows),
        loaded_rows=len(records),
        error_count=error_count,
        diagnostics=diagnostics,
    )
    return SeasonStore.from_records(records), report


def load_store_from_csv(
    path: Path,
    *,
    mapping: Mapping[str, str] | None = None,
    max_diagnostics: int = DEFAULT_MAX_DIAGNOSTICS,
) -> Tuple[SeasonStore, LoadReport]:
    return normalize_rows(load_season_csv(path, mapping=mapping), max_diagnostics=max_diagnostics)
