"""
Service Factory
===============

Reusable factory for instantiating services with proper dependency injection.

The factory owns the pieces shared across one session: the configuration,
the HTTP client, the file repository, and the record store. Applications can
override any of them, e.g. tests inject a mock repository or client.

Usage:
    from ticksight.services.factory import ServiceFactory

    factory = ServiceFactory()
    result = factory.sightings.fetch_sightings()
"""

from typing import Optional

from ticksight.core.config import Config, get_config
from ticksight.core.http import APIClient
from ticksight.core.store import RecordStore
from ticksight.repository import LocalFileRepository
from ticksight.repository.protocol import FileRepositoryProtocol

from .cache import LocalCacheService
from .sightings import SightingsService


class ServiceFactory:
    """
    Factory for creating service instances with proper dependency injection.

    Attributes:
        config: Configuration used to build the client and cache
        file_repository: File repository implementation for the local cache
        client: HTTP client for the sightings service
        store: Working set shared by every service from this factory
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        file_repository: Optional[FileRepositoryProtocol] = None,
        client: Optional[APIClient] = None,
        store: Optional[RecordStore] = None,
    ):
        """
        Initialize the service factory.

        Args:
            config: Optional configuration. If None, uses the global config.
            file_repository: Optional custom file repository. If None, uses LocalFileRepository.
            client: Optional HTTP client. If None, one is built from config.
            store: Optional record store. If None, a new empty store is created.
        """
        self.config = config or get_config()
        self.file_repository = file_repository or LocalFileRepository()
        self.client = client if client is not None else self.create_api_client()
        self.store = store if store is not None else RecordStore()

        self._cache: Optional[LocalCacheService] = None
        self._sightings: Optional[SightingsService] = None

    def create_api_client(self) -> APIClient:
        """Create APIClient from the [api] config section."""
        return APIClient(
            base_url=self.config.get("api", "base_url", ""),
            timeout=self.config.get("api", "timeout", 30),
            user_agent=self.config.get("api", "user_agent", "ticksight/0.1"),
        )

    def create_cache_service(self) -> LocalCacheService:
        """Create LocalCacheService with file repository."""
        return LocalCacheService(self.file_repository, self.config.cache_path)

    def create_sightings_service(self) -> SightingsService:
        """Create SightingsService sharing this factory's client, cache, and store."""
        return SightingsService(
            client=self.client,
            cache=self.cache,
            store=self.store,
            config=self.config,
        )

    @property
    def cache(self) -> LocalCacheService:
        """Get or create LocalCacheService instance."""
        if self._cache is None:
            self._cache = self.create_cache_service()
        return self._cache

    @property
    def sightings(self) -> SightingsService:
        """Get or create SightingsService instance."""
        if self._sightings is None:
            self._sightings = self.create_sightings_service()
        return self._sightings
