"""Select the near-term roadmap from the feature list.

A feature is near-term when its planned GA date or its decision date
falls on or before ``now + window_days``. Features without either date
never qualify. The caller passes ``now`` explicitly.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from featuredoc_engine.manifest.dates import to_naive
from featuredoc_engine.manifest.models import Feature

DEFAULT_WINDOW_DAYS = 60


def _is_near(feature: Feature, cutoff: datetime) -> bool:
    if feature.planned_date is not None and feature.planned_date <= cutoff:
        return True
    return feature.decision_date is not None and feature.decision_date <= cutoff


def _cutoff(now: datetime, window_days: int) -> datetime:
    try:
        return now + timedelta(days=window_days)
    except OverflowError:
        # Window reaches past the calendar; it covers every date
        return datetime.max if window_days > 0 else datetime.min


def _urgency_key(feature: Feature) -> tuple:
    # Planned date first, then decision date; missing dates sort last.
    return (
        feature.planned_date is None,
        feature.planned_date or datetime.max,
        feature.decision_date is None,
        feature.decision_date or datetime.max,
    )


def select_near_term(
    features: list[Feature],
    now: datetime,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> list[Feature]:
    """Return near-term features ordered by urgency.

    Args:
        features: Full feature collection.
        now: Reference instant for the window. Aware values are
            compared in UTC.
        window_days: Window size in days (inclusive cutoff).

    Returns:
        Near-term features, planned dates first and ascending, ties broken
        by decision date.
    """
    cutoff = _cutoff(to_naive(now), window_days)
    near = [f for f in features if _is_near(f, cutoff)]
    near.sort(key=_urgency_key)
    return near


def remainder(features: list[Feature], near: list[Feature]) -> list[Feature]:
    """Features not in the near-term set, in manifest order."""
    near_slugs = {f.slug for f in near}
    return [f for f in features if f.slug not in near_slugs]


def partition_features(
    features: list[Feature],
    now: datetime,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> tuple[list[Feature], list[Feature]]:
    """Split features into (near-term, remainder)."""
    near = select_near_term(features, now, window_days)
    return near, remainder(features, near)
