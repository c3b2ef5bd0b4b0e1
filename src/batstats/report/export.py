"""CSV export helpers for ranked leaderboards."""

from __future__ import annotations

import csv
from io import StringIO
from typing import Sequence

from batstats.config.reports import ReportSection
from batstats.report.tables import Ranked, section_columns


def export_section_csv(section: ReportSection, rows: Sequence[Ranked]) -> str:
    """Convert one ranked section to CSV using the table's column layout."""

    columns = section_columns(section)
    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow([column.header for column in columns])
    for rank, record in enumerate(rows, start=1):
        writer.writerow([column.getter(rank, record) for column in columns])
    return buffer.getvalue()


__all__ = ["export_section_csv"]
