"""Markdown blocks generated from the feature list.

Each renderer is a pure function returning a single Markdown string
ready to be spliced between README markers. Free text from the manifest
is shown as written; a feature without a lifecycle stage is listed with
the scheduled glyph and no stage label.
"""

from __future__ import annotations

from featuredoc_engine.manifest.dates import TBD, format_date
from featuredoc_engine.manifest.models import Feature
from featuredoc_engine.render.glyphs import (
    coverage_mark,
    lifecycle_glyph,
    status_label,
)

NEAR_TABLE_COLUMNS = ("Feature", "Target", "Status", "Purpose", "Preparation", "Decision By")
PREPARATION_PLACEHOLDER = "TBD"

EMPTY_NEAR = "_No features planned in the near-term window._"
EMPTY_LIST = "_No features listed._"
EMPTY_MATRIX = "_No features listed._"


def _cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ").strip()


def _row(cells: list[str] | tuple[str, ...]) -> str:
    return "| " + " | ".join(cells) + " |"


def _header(columns: list[str] | tuple[str, ...]) -> list[str]:
    return [_row(columns), _row(["---"] * len(columns))]


def _target(feature: Feature) -> str:
    if feature.planned_ga is None:
        return ""
    if feature.planned_ga == TBD:
        return TBD
    return feature.planned_ga


def render_near_table(near: list[Feature]) -> str:
    """Render the near-term roadmap table, keeping the caller's order."""
    if not near:
        return EMPTY_NEAR

    lines = _header(NEAR_TABLE_COLUMNS)
    for f in near:
        lines.append(_row([
            _cell(f.display_name),
            _cell(_target(f)),
            _cell(status_label(f.current_status)),
            _cell(f.purpose),
            PREPARATION_PLACEHOLDER,
            format_date(f.decision_date),
        ]))
    return "\n".join(lines)


def render_flattened_list(features: list[Feature]) -> str:
    """Render every feature as a bullet, alphabetically by name."""
    if not features:
        return EMPTY_LIST

    ordered = sorted(features, key=lambda f: (f.name.lower(), f.name))
    lines = []
    for f in ordered:
        glyph = lifecycle_glyph(f.lifecycle_stage)
        if f.lifecycle_stage:
            lines.append(f"- {glyph} {f.lifecycle_stage}: {f.display_name}")
        else:
            lines.append(f"- {glyph} {f.display_name}")
    return "\n".join(lines)


def policy_keys(features: list[Feature]) -> list[str]:
    """Sorted union of policy keys across all features."""
    keys: set[str] = set()
    for f in features:
        keys |= set(f.policies)
    return sorted(keys)


def render_policy_matrix(features: list[Feature]) -> str:
    """Render the features x policy-keys coverage table in manifest order."""
    if not features:
        return EMPTY_MATRIX

    keys = policy_keys(features)
    lines = _header(["Feature", *(_cell(k) for k in keys)])
    for f in features:
        marks = [coverage_mark(f.covers(k)) for k in keys]
        lines.append(_row([_cell(f.display_name), *marks]))
    return "\n".join(lines)
