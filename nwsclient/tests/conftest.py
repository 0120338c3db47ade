"""Shared test fixtures."""

import json
from collections.abc import AsyncIterator, Iterator
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
import yaml

from nwsclient.config.defaults import DEFAULT_LOCATIONS
from nwsclient.config.schema import ClientConfig
from nwsclient.ingest.nws_client import NwsClient

FIXTURE_DIR = Path(__file__).parent / "fixtures"
TEST_BASE_URL = "https://test-nws.example.com"


class FakeClock:
    """Controllable replacement for time.time."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def no_sleep() -> Iterator[AsyncMock]:
    """Patch backoff sleeps so retries run instantly. Yields the mock."""
    with patch("nwsclient.ingest.fetcher.asyncio.sleep", new_callable=AsyncMock) as m:
        yield m


@pytest_asyncio.fixture
async def nws(clock: FakeClock) -> AsyncIterator[NwsClient]:
    client = NwsClient(base_url=TEST_BASE_URL, clock=clock)
    yield client
    await client.aclose()


@pytest.fixture
def points_denver() -> dict:
    return load_fixture("points_denver.json")


@pytest.fixture
def forecast_denver() -> dict:
    return load_fixture("forecast_denver.json")


@pytest.fixture
def forecast_hourly_denver() -> dict:
    return load_fixture("forecast_hourly_denver.json")


@pytest.fixture
def alerts_denver() -> dict:
    return load_fixture("alerts_denver.json")


@pytest.fixture
def stations_denver() -> dict:
    return load_fixture("stations_denver.json")


@pytest.fixture
def observation_kbkf() -> dict:
    return load_fixture("observation_kbkf.json")


@pytest.fixture
def default_config() -> ClientConfig:
    """Return default ClientConfig with default locations."""
    return ClientConfig(locations=DEFAULT_LOCATIONS)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"timeout_seconds": 10.0},
        "cache": {"alerts_seconds": 120},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
