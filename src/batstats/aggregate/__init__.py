"""Career aggregation over normalized season records."""

from .careers import aggregate, aggregate_store, build_career, group_by_player

__all__ = [
    "aggregate",
    "aggregate_store",
    "build_career",
    "group_by_player",
]
