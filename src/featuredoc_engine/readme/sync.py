"""README sync: regenerate the feature sections from the manifest.

The sync process:
1. Load the manifest once
2. Partition features into near-term and remainder
3. Render the flattened list and policy matrix (and the near-term table
   when the README still carries its marker)
4. Replace each marked region and write the README back

Preserves all manually-written content outside the markers.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from featuredoc_engine.manifest.loader import load_manifest
from featuredoc_engine.manifest.models import Feature
from featuredoc_engine.readme import FLATTENED_FEATURES, FUTURE_NEAR, POLICY_MATRIX
from featuredoc_engine.readme.patcher import (
    PatchResult,
    has_marker,
    patch_text,
    read_document,
)
from featuredoc_engine.render.blocks import (
    render_flattened_list,
    render_near_table,
    render_policy_matrix,
)
from featuredoc_engine.roadmap.near_term import DEFAULT_WINDOW_DAYS, partition_features


@dataclass
class SyncResult:
    """Result of a README sync run."""

    total: int
    near_term: int
    remainder: int
    patch: PatchResult


def build_blocks(
    features: list[Feature],
    near: list[Feature],
    document_text: str,
) -> dict[str, str]:
    """Render the generated sections keyed by marker name.

    The near-term table is only rendered when the document has a
    FUTURE_NEAR marker pair; the selection itself is always computed.
    """
    blocks = {}
    if has_marker(document_text, FUTURE_NEAR):
        blocks[FUTURE_NEAR] = render_near_table(near)
    blocks[FLATTENED_FEATURES] = render_flattened_list(features)
    blocks[POLICY_MATRIX] = render_policy_matrix(features)
    return blocks


def sync_readme(
    manifest_path: Path | str | None = None,
    readme_path: Path | str | None = None,
    window_days: int = DEFAULT_WINDOW_DAYS,
    now: datetime | None = None,
    dry_run: bool = False,
) -> SyncResult:
    """Regenerate the README's feature sections.

    Args:
        manifest_path: Feature manifest. Defaults to the project manifest.
        readme_path: Target document. Defaults to the project README.
        window_days: Near-term window in days.
        now: Reference instant for the window (defaults to the current time).
        dry_run: Compute everything but leave the README untouched.

    Raises:
        FileNotFoundError: If the manifest or the README doesn't exist.
    """
    from featuredoc_engine.paths import readme_path as _default_readme_path

    features = load_manifest(manifest_path)
    now = now or datetime.now()
    near, rest = partition_features(features, now, window_days)

    doc_path = Path(readme_path) if readme_path else _default_readme_path()
    document_text = read_document(doc_path)

    blocks = build_blocks(features, near, document_text)
    patch = patch_text(doc_path, document_text, blocks, dry_run=dry_run)

    return SyncResult(
        total=len(features),
        near_term=len(near),
        remainder=len(rest),
        patch=patch,
    )
