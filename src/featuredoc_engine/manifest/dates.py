"""Best-effort date normalization for manifest fields.

Manifest dates are free text written by hand. Three strict formats are
tried first, in priority order:
- ``2026-03-14`` (date only)
- ``2026-03`` (year and month, first of the month)
- ``2026-03-14T09:30:00`` (date with seconds)

Anything else goes through a generic pass (ISO 8601 plus a few common
human spellings such as ``March 14, 2026``). Values that still don't
parse come back as None; an unparseable date is the same as no date.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

TBD = "TBD"

_STRICT_FORMATS = ("%Y-%m-%d", "%Y-%m", "%Y-%m-%dT%H:%M:%S")

_GENERIC_FORMATS = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%Y-%m-%d %H:%M:%S",
    "%d %B %Y",
    "%d %b %Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%B %Y",
    "%b %Y",
)


def to_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _parse_generic(token: str) -> datetime | None:
    try:
        return to_naive(datetime.fromisoformat(token.replace("Z", "+00:00")))
    except ValueError:
        pass
    for fmt in _GENERIC_FORMATS:
        try:
            return datetime.strptime(token, fmt)
        except ValueError:
            continue
    return None


def normalize_date(value: Any) -> datetime | None:
    """Normalize a manifest date value to a naive datetime.

    Args:
        value: Raw manifest value (string, date, datetime or None).

    Returns:
        The parsed datetime, or None when the value is missing, ``TBD``
        or unparseable. Never raises.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return to_naive(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        return None

    token = value.strip()
    if not token or token.upper() == TBD:
        return None

    for fmt in _STRICT_FORMATS:
        try:
            return datetime.strptime(token, fmt)
        except ValueError:
            continue
    return _parse_generic(token)


def format_date(value: datetime | None) -> str:
    """Format a normalized date as YYYY-MM-DD, or an empty string."""
    if value is None:
        return ""
    return value.strftime("%Y-%m-%d")
