"""Convert raw season rows into typed season records."""

from __future__ import annotations

import logging
import math
import re
from typing import Callable, Optional, TypeVar

from pydantic import ValidationError

from batstats.models import RawSeasonRow, SeasonRecord
from batstats.models.season import SEASON_FIELDS


logger = logging.getLogger(__name__)

MISSING_SENTINEL = "--"

_REQUIRED_INT_FIELDS: tuple[str, ...] = (
    "season",
    "games_played",
    "at_bats",
    "runs",
    "hits",
    "doubles",
    "triples",
    "homeruns",
    "walks",
)
_REQUIRED_FLOAT_FIELDS: tuple[str, ...] = ("batting_average", "slugging_percentage")
_OPTIONAL_INT_FIELDS: tuple[str, ...] = ("rbi", "stolen_bases", "caught_stealing")
_OPTIONAL_FLOAT_FIELDS: tuple[str, ...] = (
    "strikeouts",
    "on_base_percentage",
    "on_base_plus_slugging",
)

N = TypeVar("N", int, float)


class NormalizationError(ValueError):
    """Raised when a raw row cannot be turned into a season record."""

    def __init__(self, field: str, value: object, reason: str, *, line: int | None = None):
        self.field = field
        self.value = value
        self.reason = reason
        self.line = line
        super().__init__(self._describe())

    def _describe(self) -> str:
        message = f"{self.field}={self.value!r}: {self.reason}"
        if self.line is not None:
            return f"line {self.line}: {message}"
        return message

    def at_line(self, line: int | None) -> "NormalizationError":
        return NormalizationError(self.field, self.value, self.reason, line=line)


# ASCII only: int() and float() also accept underscores and non-ASCII digits.
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _parse_int(text: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"{text!r} is not a plain integer")
    return int(text)


def _parse_float(text: str) -> float:
    if not _FLOAT_PATTERN.fullmatch(text):
        raise ValueError(f"{text!r} is not a plain number")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"{text!r} is not a finite number")
    return value


def _type_label(parser: Callable[[str], N]) -> str:
    return "an integer" if parser is _parse_int else "a number"


def _required_number(raw: RawSeasonRow, field: str, parser: Callable[[str], N]) -> N:
    value = getattr(raw, field)
    text = (value or "").strip()
    if not text or text == MISSING_SENTINEL:
        raise NormalizationError(field, value, "required value is missing")
    try:
        return parser(text)
    except ValueError:
        raise NormalizationError(field, value, f"expected {_type_label(parser)}") from None


def _optional_number(raw: RawSeasonRow, field: str, parser: Callable[[str], N]) -> Optional[N]:
    value = getattr(raw, field)
    if value is None:
        return None
    text = value.strip()
    if not text or text == MISSING_SENTINEL:
        return None
    try:
        return parser(text)
    except ValueError:
        raise NormalizationError(field, value, f"expected {_type_label(parser)} or {MISSING_SENTINEL!r}") from None


def _required_text(raw: RawSeasonRow, field: str) -> str:
    value = getattr(raw, field)
    text = (value or "").strip()
    if not text:
        raise NormalizationError(field, value, "required value is missing")
    return text


def _check_encoding(raw: RawSeasonRow) -> None:
    # The CSV reader decodes with surrogateescape; leftover surrogates are bad bytes.
    for field in SEASON_FIELDS:
        value = getattr(raw, field)
        if value is None:
            continue
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise NormalizationError(field, value, "contains bytes that are not valid UTF-8") from None


def normalize(raw: RawSeasonRow, *, line: int | None = None) -> SeasonRecord:
    """Return the typed record for ``raw`` or raise :class:`NormalizationError`.

    Optional numeric columns treat the ``"--"`` sentinel, blank text and a
    missing column as absent. Any other text that fails to parse is an error,
    never a silent absence. Required columns accept only parseable values.
    """

    try:
        _check_encoding(raw)
        data: dict[str, object] = {
            "player_link": _required_text(raw, "player_link"),
            "last_name": _required_text(raw, "last_name"),
            "first_name": (raw.first_name or "").strip() or None,
            "position": (raw.position or "").strip(),
            "team": (raw.team or "").strip(),
        }
        for field in _REQUIRED_INT_FIELDS:
            data[field] = _required_number(raw, field, _parse_int)
        for field in _REQUIRED_FLOAT_FIELDS:
            data[field] = _required_number(raw, field, _parse_float)
        for field in _OPTIONAL_INT_FIELDS:
            data[field] = _optional_number(raw, field, _parse_int)
        for field in _OPTIONAL_FLOAT_FIELDS:
            data[field] = _optional_number(raw, field, _parse_float)
    except NormalizationError as exc:
        raise exc.at_line(line) from None

    try:
        return SeasonRecord(**data)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = str(first["loc"][0]) if first.get("loc") else "record"
        logger.debug("Season record rejected by model validation: %s", exc)
        raise NormalizationError(field, data.get(field), first["msg"], line=line) from None


def _format_number(value: int | float | None) -> str:
    if value is None:
        return MISSING_SENTINEL
    return str(value)


def to_raw(record: SeasonRecord) -> RawSeasonRow:
    """Render a normalized record back into its textual row form."""

    data: dict[str, str] = {
        "player_link": record.player_link,
        "first_name": record.first_name or "",
        "last_name": record.last_name,
        "position": record.position,
        "team": record.team,
    }
    for field in _REQUIRED_INT_FIELDS + _REQUIRED_FLOAT_FIELDS + _OPTIONAL_INT_FIELDS + _OPTIONAL_FLOAT_FIELDS:
        data[field] = _format_number(getattr(record, field))
    return RawSeasonRow(**data)
