"""Environment-driven defaults for the command line."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path


logger = logging.getLogger(__name__)

_DATA_PATH_ENV = "BATSTATS_DATA_PATH"
_TOP_K_ENV = "BATSTATS_TOP_K"
_MAX_DIAGNOSTICS_ENV = "BATSTATS_MAX_DIAGNOSTICS"

_DATA_PATH_DEFAULT = "mlb_season_data.csv"
_TOP_K_DEFAULT = 10
_MAX_DIAGNOSTICS_DEFAULT = 5


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    """Read a BATSTATS_* count, falling back to ``default`` when unset or malformed."""

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("Ignoring %s=%r (not a whole number); keeping %d", name, raw, default)
        return default
    if min_value is not None and value < min_value:
        logger.warning("Raising %s=%d to the minimum of %d", name, value, min_value)
        value = min_value
    return value


def _env_path(name: str, default: str) -> Path:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return Path(default)
    return Path(raw.strip())


@dataclass(frozen=True)
class Settings:
    data_path: Path
    top_k: int
    max_diagnostics: int

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            data_path=_env_path(_DATA_PATH_ENV, _DATA_PATH_DEFAULT),
            top_k=_env_int(_TOP_K_ENV, _TOP_K_DEFAULT, min_value=1),
            max_diagnostics=_env_int(_MAX_DIAGNOSTICS_ENV, _MAX_DIAGNOSTICS_DEFAULT, min_value=0),
        )
