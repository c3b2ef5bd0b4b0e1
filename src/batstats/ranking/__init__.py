"""Leaderboard ranking over season and career stores."""

from .service import DEFAULT_TOP_K, InsufficientDataError, StatsService, top_k

__all__ = ["DEFAULT_TOP_K", "InsufficientDataError", "StatsService", "top_k"]
