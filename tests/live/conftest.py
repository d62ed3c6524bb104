"""
Live API test fixtures.

These tests hit the REAL Intervals.icu API to check that the response
shapes the gateway relies on still hold. They need a real API key.

Provide credentials via environment variables:
  INTERVALS_ICU_API_KEY  = API key (Settings > Developer Settings)
  INTERVALS_ICU_BASE_URL = API base URL (default: https://intervals.icu/api/v1)
  INTERVALS_ICU_ATHLETE  = athlete id (default: 0, the key's owner)

Run: pytest tests/live/ -v
"""

import os

import pytest


DEFAULT_BASE_URL = "https://intervals.icu/api/v1"


@pytest.fixture(scope="session")
def api_key():
    """Skips all live tests if no API key is available."""
    key = os.environ.get("INTERVALS_ICU_API_KEY")
    if not key:
        pytest.skip("No Intervals.icu credentials: set INTERVALS_ICU_API_KEY")
    return key


@pytest.fixture(scope="session")
def auth(api_key):
    """Basic auth tuple for requests: fixed username, key as password."""
    return ("API_KEY", api_key)


@pytest.fixture(scope="session")
def base_url():
    return os.environ.get("INTERVALS_ICU_BASE_URL", DEFAULT_BASE_URL).rstrip("/")


@pytest.fixture(scope="session")
def athlete_id():
    return os.environ.get("INTERVALS_ICU_ATHLETE", "0")
