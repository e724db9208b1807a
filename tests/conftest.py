# tests/conftest.py
"""
Global pytest fixtures for ticksight tests.
"""

from datetime import datetime
from unittest.mock import Mock

import pytest
import requests

from ticksight.core.config import get_default_config, reset_config
from ticksight.models.sighting import Sighting
from tests.mocks.mock_repository import MockFileRepository

BASE_URL = "https://sightings.test"


def http_error(status: int) -> requests.HTTPError:
    """Build the HTTPError raised by ``raise_for_status`` for a status code."""
    response = Mock(status_code=status)
    return requests.HTTPError(f"{status} Server Error", response=response)


@pytest.fixture(autouse=True)
def isolated_globals(monkeypatch):
    """Keep global config, CLI factory, and environment overrides out of every test."""
    from ticksight.cli.service_helpers import reset_factory

    monkeypatch.delenv("TICKSIGHT_API_URL", raising=False)
    reset_config()
    reset_factory()
    yield
    reset_config()
    reset_factory()


@pytest.fixture
def now() -> datetime:
    """Fixed evaluation time used for severity classification."""
    return datetime(2024, 11, 20, 12, 0, 0)


@pytest.fixture
def sample_sightings():
    """A small working set covering every severity bucket and a missing coordinate."""
    return [
        Sighting(id="1", date="2024-11-10T09:15:00", location="London", species="Marsh tick", lat=51.5, lng=-0.12),
        Sighting(id="2", date="2024-07-01T10:00:00", location="Leeds", species="Fox/badger tick", lat=53.8, lng=-1.5),
        Sighting(id="3", date="2024-01-15T08:00:00", location="London", species="Passerine tick", lat=51.49, lng=-0.14),
        Sighting(id="4", date="2022-03-03T12:00:00", location="York", species="Marsh tick", lat=53.96, lng=-1.08),
        Sighting(id="5", date="2018-05-05T12:00:00", location="Bath", species="Tree-hole tick", lat=51.37, lng=-2.36),
        Sighting(id="6", date="2024-11-18T18:00:00", location="Oxford", species="Marsh tick"),
    ]


@pytest.fixture
def sighting_payload():
    """Raw records as returned by the sightings endpoint."""
    return [
        {
            "id": 101,
            "date": "2024-11-15T14:30:00",
            "location": "London",
            "species": "Fox/badger tick",
            "latinName": "Ixodes canisuga",
            "lat": 51.5074,
            "lng": -0.1278,
        },
        {
            "id": "102",
            "date": "2024-06-01T09:00:00",
            "location": "Bristol",
            "species": "Marsh tick",
            "severity": "Med",
            "latitude": 51.4545,
            "longitude": -2.5879,
        },
    ]


@pytest.fixture
def mock_repository() -> MockFileRepository:
    """Create a mock file repository for testing."""
    return MockFileRepository()


@pytest.fixture
def mock_client(mocker):
    """HTTP client double whose get/post behaviour each test configures."""
    client = mocker.Mock()
    client.url_for.side_effect = lambda endpoint: f"{BASE_URL}{endpoint}"
    return client


@pytest.fixture
def config():
    """Default configuration with a predictable cache path."""
    config = get_default_config()
    config.set("cache", "path", "/data/tick_sightings.json")
    return config
