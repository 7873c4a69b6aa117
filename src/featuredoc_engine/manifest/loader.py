"""Load the feature manifest (JSON or YAML)."""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from featuredoc_engine.manifest.models import Feature
from featuredoc_engine.paths import manifest_path as _default_manifest_path


class ManifestError(ValueError):
    """The manifest is not valid JSON/YAML or does not hold a feature list."""


def _read_records(path: Path) -> list:
    with open(path, encoding="utf-8") as f:
        try:
            if path.suffix.lower() in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ManifestError(f"manifest at {path} is not valid: {e}") from e

    if isinstance(data, dict):
        data = data.get("features")
    if not isinstance(data, list):
        raise ManifestError(f"manifest at {path} does not contain a feature list")
    return data


def load_manifest(path: Path | str | None = None) -> list[Feature]:
    """Load features from the manifest, in manifest order.

    Args:
        path: Path to the manifest. Defaults to the project manifest.

    Returns:
        List of Feature objects with normalized dates.

    Raises:
        FileNotFoundError: If the manifest doesn't exist.
        ManifestError: If the file is not valid JSON/YAML or the top level
            is not a list of feature records.
    """
    manifest = Path(path) if path else _default_manifest_path()
    if not manifest.is_file():
        raise FileNotFoundError(f"manifest not found: {manifest}")

    records = _read_records(manifest)
    return [Feature.from_dict(r) for r in records if isinstance(r, dict)]
