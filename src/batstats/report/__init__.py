"""Leaderboard presentation (text tables, CSV export)."""

from .export import export_section_csv
from .tables import Column, render_table, section_columns

__all__ = [
    "Column",
    "export_section_csv",
    "render_table",
    "section_columns",
]
