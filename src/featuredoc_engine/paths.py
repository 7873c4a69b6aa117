"""Project path resolution.

Resolves the manifest and README locations. Uses environment variables
when available, falls back to paths relative to the project checkout.

Environment variables:
    FEATUREDOC_ROOT: project root (default: the checkout containing src/)
    FEATUREDOC_MANIFEST: feature manifest (default: <root>/features.json)
    FEATUREDOC_README: target document (default: <root>/README.md)
    FEATUREDOC_WINDOW_DAYS: near-term window in days (default: 60)
"""

from __future__ import annotations

import os
from pathlib import Path

# src/featuredoc_engine/paths.py -> checkout root
_DEFAULT_ROOT = Path(__file__).resolve().parents[2]
_DEFAULT_WINDOW_DAYS = 60


def project_root() -> Path:
    """Return the project root directory."""
    return Path(os.environ.get("FEATUREDOC_ROOT", str(_DEFAULT_ROOT)))


def manifest_path() -> Path:
    """Return the path to the feature manifest."""
    env = os.environ.get("FEATUREDOC_MANIFEST")
    if env:
        return Path(env)
    return project_root() / "features.json"


def readme_path() -> Path:
    """Return the path to the README that receives generated sections."""
    env = os.environ.get("FEATUREDOC_README")
    if env:
        return Path(env)
    return project_root() / "README.md"


def default_window_days() -> int:
    """Return the near-term window, honouring FEATUREDOC_WINDOW_DAYS."""
    raw = os.environ.get("FEATUREDOC_WINDOW_DAYS")
    if not raw:
        return _DEFAULT_WINDOW_DAYS
    try:
        return int(raw)
    except ValueError:
        return _DEFAULT_WINDOW_DAYS
