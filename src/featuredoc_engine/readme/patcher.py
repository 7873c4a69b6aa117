"""Replace generated regions between README markers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from featuredoc_engine.readme import begin_marker, end_marker


@dataclass
class PatchResult:
    """Outcome of patching one document."""

    path: str
    updated: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    changed: bool = False
    dry_run: bool = False


def _region_pattern(name: str) -> re.Pattern:
    return re.compile(
        re.escape(begin_marker(name)) + r".*?" + re.escape(end_marker(name)),
        re.DOTALL,
    )


def has_marker(text: str, name: str) -> bool:
    """True when the document holds a complete marker pair for ``name``."""
    return _region_pattern(name).search(text) is not None


def replace_marker(text: str, name: str, content: str) -> str:
    """Replace everything between the ``name`` markers with ``content``.

    The markers themselves are rewritten on their own lines around the
    new content. Text without the marker pair is returned unchanged.
    """
    region = f"{begin_marker(name)}\n{content}\n{end_marker(name)}"
    # Callable replacement keeps backslashes in content literal
    return _region_pattern(name).sub(lambda _m: region, text)


def patch_document(text: str, replacements: dict[str, str]) -> str:
    """Apply each marker replacement in turn and return the new text."""
    for name, content in replacements.items():
        text = replace_marker(text, name, content)
    return text


def read_document(path: Path | str) -> str:
    """Read a document as UTF-8, keeping its line endings."""
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def patch_text(
    path: Path | str,
    content: str,
    replacements: dict[str, str],
    dry_run: bool = False,
) -> PatchResult:
    """Patch already-read document text and write it to ``path`` once.

    Nothing is written when the text is unchanged or on a dry run.
    """
    result = PatchResult(path=str(path), dry_run=dry_run)
    for name in replacements:
        if has_marker(content, name):
            result.updated.append(name)
        else:
            result.missing.append(name)

    new_content = patch_document(content, replacements)
    result.changed = new_content != content
    if result.changed and not dry_run:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(new_content)
    return result


def patch_file(
    path: Path | str,
    replacements: dict[str, str],
    dry_run: bool = False,
) -> PatchResult:
    """Read, patch and write back a document on disk.

    Raises:
        FileNotFoundError: If the document doesn't exist.
    """
    return patch_text(path, read_document(path), replacements, dry_run=dry_run)
