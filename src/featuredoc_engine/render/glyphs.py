"""Glyphs for lifecycle stages, status labels and policy coverage."""

from __future__ import annotations

import re

COMPLETED = "✅"
EXPERIMENTAL = "🧪"
REFINEMENT = "🛠️"
SCHEDULED = "🗓️"

COVERED = "✅"
NOT_COVERED = "❌"

_ENHANCING_RE = re.compile(r"enhancing", re.IGNORECASE)


def status_label(current_status: str) -> str:
    """Prefix a free-text status with its glyph (first match wins)."""
    if current_status.startswith("GA"):
        return f"{COMPLETED} {current_status}"
    if "Preview" in current_status:
        return f"{EXPERIMENTAL} {current_status}"
    if "enhanc" in current_status.lower():
        return f"{REFINEMENT} {current_status}"
    return current_status


def lifecycle_glyph(stage: str) -> str:
    """Glyph for a lifecycle stage; unknown stages count as scheduled."""
    if stage == "GA":
        return COMPLETED
    if stage == "Preview":
        return EXPERIMENTAL
    if _ENHANCING_RE.search(stage):
        return REFINEMENT
    return SCHEDULED


def coverage_mark(covered: bool) -> str:
    return COVERED if covered else NOT_COVERED
