"""Shared fixtures for service tests."""

import pytest

from ticksight.core.store import RecordStore
from ticksight.services.cache import LocalCacheService
from ticksight.services.sightings import SightingsService

CACHE_PATH = "/data/tick_sightings.json"


class FrozenClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_700_000_000_000) -> None:
        self.value = start

    def __call__(self) -> int:
        return self.value


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def cache(mock_repository, clock) -> LocalCacheService:
    """Local cache backed by the in-memory repository."""
    return LocalCacheService(mock_repository, CACHE_PATH, clock=clock)


@pytest.fixture
def store() -> RecordStore:
    return RecordStore()


@pytest.fixture
def service(mock_client, cache, store, config) -> SightingsService:
    """SightingsService wired to a mock HTTP client and in-memory cache."""
    return SightingsService(client=mock_client, cache=cache, store=store, config=config)
