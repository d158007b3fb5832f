"""
Shared fixtures and utilities for Douban categories tests.
"""

# Set environment to test mode FIRST, before any imports
import os

os.environ["ENVIRONMENT"] = "test"

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from firebase_functions import https_fn

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(filename: str) -> dict:
    """Load a fixture from JSON file.

    Args:
        filename: Name of the fixture file

    Returns:
        Parsed JSON data

    Raises:
        FileNotFoundError: If fixture file doesn't exist
    """
    fixture_path = FIXTURES_DIR / filename
    if not fixture_path.exists():
        raise FileNotFoundError(
            f"Fixture file not found: {fixture_path}\n"
            f"Create fixtures from real API responses for testing."
        )

    with open(fixture_path, encoding="utf-8") as f:
        return json.load(f)


def build_mock_session(status: int = 200, json_data=None, get_side_effect=None) -> MagicMock:
    """Build a mock aiohttp.ClientSession whose get() yields a single response."""
    mock_response = AsyncMock()
    mock_response.status = status
    mock_response.json = AsyncMock(return_value=json_data)

    mock_session = MagicMock()
    mock_session.__aenter__.return_value = mock_session
    mock_session.__aexit__.return_value = None
    if get_side_effect is not None:
        mock_session.get.side_effect = get_side_effect
    else:
        mock_session.get.return_value.__aenter__.return_value = mock_response
        mock_session.get.return_value.__aexit__.return_value = None
    return mock_session


@pytest.fixture
def recent_hot_payload():
    """Raw recent_hot/movie payload."""
    return load_fixture("recent_hot_movie.json")


@pytest.fixture
def mock_request():
    """Create a mock Firebase Functions Request object."""

    def _create_mock_request(args: dict[str, str | None] | None = None):
        mock_req = MagicMock(spec=https_fn.Request)
        # Make args support .get() method like a dict
        args_dict = args or {}
        mock_req.args = MagicMock()
        mock_req.args.get = lambda key, default=None: args_dict.get(key, default)
        return mock_req

    return _create_mock_request


@pytest.fixture(autouse=True)
def clear_cache_time_env():
    """Keep CACHE_TIME from leaking between tests."""
    original = os.environ.pop("CACHE_TIME", None)
    yield
    os.environ.pop("CACHE_TIME", None)
    if original is not None:
        os.environ["CACHE_TIME"] = original
