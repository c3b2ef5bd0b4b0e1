"""Command-line interface for printing batting leaderboards."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Mapping, Sequence

from batstats.config import Settings, get_report, iter_reports
from batstats.config_loader import ColumnProfile
from batstats.ingest import MissingInputError, load_season_csv, normalize_rows
from batstats.models.season import SEASON_FIELDS
from batstats.ranking import InsufficientDataError, StatsService
from batstats.report import export_section_csv, render_table


logger = logging.getLogger(__name__)


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="batstats",
        description="A CLI tool for analyzing baseball statistics",
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=settings.data_path,
        help=f"Path to the season CSV (default: {settings.data_path})",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=settings.top_k,
        help="Number of leaders to show per table",
    )
    parser.add_argument(
        "--format",
        choices=("text", "csv"),
        default="text",
        help="Output format for leaderboards",
    )
    parser.add_argument(
        "--column",
        action="append",
        default=[],
        help="Mapping for CSV columns (e.g., player_link=link)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load column mapping JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save column mapping JSON", default=None)
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command")
    for bundle in iter_reports():
        subparsers.add_parser(bundle.name, help=bundle.description)
    return parser


def _check_fields(mapping: Mapping[str, str], source: str) -> dict[str, str]:
    checked: dict[str, str] = {}
    for key, value in mapping.items():
        key = key.strip()
        if key not in SEASON_FIELDS:
            raise ValueError(f"Unknown season field '{key}' in {source}")
        checked[key] = value.strip()
    return checked


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected field=header")
        key, value = entry.split("=", 1)
        mapping.update(_check_fields({key: value}, f"mapping entry '{entry}'"))
    return mapping


def _print_usage() -> None:
    print("Baseball Statistics Tool")
    print("========================")
    print()
    print("Available commands:")
    for bundle in iter_reports():
        print(f"  {bundle.name:<9} - {bundle.description}")
    print()
    print("Usage: batstats <command>")
    print("For more help: batstats --help")


def main(argv: Sequence[str] | None = None) -> int:
    settings = Settings.from_env()
    parser = _build_parser(settings)
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        column_mapping = _parse_mapping(args.column)
    except ValueError as exc:
        parser.error(str(exc))
    if args.top < 1:
        parser.error("--top must be at least 1")

    if args.load_profile:
        try:
            profile = ColumnProfile.load(args.load_profile)
            profile_mapping = _check_fields(profile.columns, f"profile {args.load_profile}")
        except (OSError, ValueError) as exc:
            parser.error(f"Could not load column profile {args.load_profile}: {exc}")
        column_mapping = profile_mapping | column_mapping

    if args.save_profile:
        ColumnProfile(column_mapping).save(args.save_profile)
        print(f"Saved column profile to {args.save_profile}")

    if args.command is None:
        _print_usage()
        return 0

    print("Loading baseball data...")
    try:
        raw_rows = load_season_csv(args.data, mapping=column_mapping or None)
    except MissingInputError as exc:
        print(f"Error: {exc.path} not found. Please put your CSV file in the project root folder or pass --data.")
        return 0

    store, report = normalize_rows(raw_rows, max_diagnostics=settings.max_diagnostics)
    print(f"Successfully loaded {report.total_rows} raw records")
    if report.error_count:
        print(f"Skipped {report.error_count} malformed rows")
        for message in report.diagnostics:
            print(f"  {message}")
    print(f"Successfully cleaned {report.loaded_rows} records")

    service = StatsService(store)
    bundle = get_report(args.command)
    for section in bundle.sections:
        try:
            if section.metric.scope == "season":
                rows = service.rank_seasons(section.metric, k=args.top)
            else:
                rows = service.rank_careers(section.metric, k=args.top)
        except InsufficientDataError as exc:
            logger.debug("Leaderboard %s could not be filled: %s", section.metric.key, exc)
            print(
                f"Not enough data for '{section.title.format(k=args.top)}': "
                f"{exc.available} available, {exc.requested} requested"
            )
            return 1

        if args.format == "csv":
            print(export_section_csv(section, rows), end="")
        else:
            print()
            print(render_table(section, rows))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
