"""Roadmap module: near-term window selection over the feature list."""

from featuredoc_engine.roadmap.near_term import (
    DEFAULT_WINDOW_DAYS,
    partition_features,
    remainder,
    select_near_term,
)

__all__ = [
    "DEFAULT_WINDOW_DAYS",
    "partition_features",
    "remainder",
    "select_near_term",
]
