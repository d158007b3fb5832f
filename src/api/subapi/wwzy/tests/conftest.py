"""
Shared fixtures and utilities for WWZY service tests.
"""

import os

os.environ["ENVIRONMENT"] = "test"

import json
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(filename: str) -> dict:
    """Load a fixture from JSON file."""
    fixture_path = FIXTURES_DIR / filename
    if not fixture_path.exists():
        raise FileNotFoundError(f"Fixture file not found: {fixture_path}")

    with open(fixture_path, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def videolist_payload():
    """Raw ac=videolist payload."""
    return load_fixture("videolist_page1.json")
