"""Shared fixtures for controller tests."""

import pytest

from ticksight.controllers.tracker import TrackerController
from ticksight.services.factory import ServiceFactory


@pytest.fixture
def factory(mock_client, mock_repository, config) -> ServiceFactory:
    """ServiceFactory with a mock HTTP client and in-memory file repository."""
    return ServiceFactory(config=config, file_repository=mock_repository, client=mock_client)


@pytest.fixture
def controller(factory, now) -> TrackerController:
    return TrackerController(factory, clock=lambda: now)
