"""Shared test fixtures for featuredoc-engine."""

from datetime import datetime
from pathlib import Path

import pytest

from featuredoc_engine.manifest.loader import load_manifest

FIXTURES = Path(__file__).parent / "fixtures"

# Fixed reference instant for window calculations
NOW = datetime(2026, 1, 1)


@pytest.fixture
def features():
    return load_manifest(FIXTURES / "features.json")


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def readme(tmp_path):
    target = tmp_path / "README.md"
    target.write_text(
        (FIXTURES / "README-sample.md").read_text(encoding="utf-8"),
        encoding="utf-8",
    )
    return target
