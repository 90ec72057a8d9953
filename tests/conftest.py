"""Shared fixtures for the test suite."""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any, cast

import pytest
import structlog

from steamr.api import SteamClient
from steamr.config import get_settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"

STEAM_ENV_VARS = (
    "STEAM_API_KEY",
    "STEAM_BASE_URL",
    "STEAM_TIMEOUT_SECONDS",
    "STEAM_USER_AGENT",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_INCLUDE_TIMESTAMP",
)


def load_fixture(name: str) -> dict[str, Any]:
    """Load a JSON fixture file."""
    with (FIXTURES_DIR / name).open(encoding="utf-8") as f:
        return cast(dict[str, Any], json.load(f))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Isolate tests from the developer's environment and .env file."""
    for var in STEAM_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def client() -> Iterator[SteamClient]:
    """Steam client carrying a test API key."""
    with SteamClient("test_api_key_123") as steam_client:
        yield steam_client


@pytest.fixture
def friend_list_response() -> dict[str, Any]:
    return load_fixture("friend_list_response.json")


@pytest.fixture
def owned_games_response() -> dict[str, Any]:
    return load_fixture("owned_games_response.json")


@pytest.fixture
def game_news_response() -> dict[str, Any]:
    return load_fixture("game_news_response.json")


@pytest.fixture
def player_stats_response() -> dict[str, Any]:
    return load_fixture("player_stats_response.json")
