"""Season and career batting leaderboards built from flat stat tables."""

__version__ = "0.1.0"
