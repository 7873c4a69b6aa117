"""Manifest module: load feature records and normalize their dates."""

from featuredoc_engine.manifest.dates import format_date, normalize_date
from featuredoc_engine.manifest.loader import ManifestError, load_manifest
from featuredoc_engine.manifest.models import Feature

__all__ = [
    "Feature",
    "ManifestError",
    "format_date",
    "load_manifest",
    "normalize_date",
]
