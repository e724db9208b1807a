# services/cache.py
"""
Service for the local sightings cache.

Sightings that could not be submitted to the remote service are kept in a
single JSON array file so they survive across sessions. The cache never
evicts entries; it only grows until cleared.

Example:
    >>> cache = LocalCacheService(LocalFileRepository(), "~/.local/share/ticksight/tick_sightings.json")
    >>> saved = cache.save(sighting)
    >>> saved.id
    'local-1731767400000'
"""

import json
import time
from dataclasses import replace
from pathlib import Path
from typing import Any, Callable, List, Optional, Union

from ticksight.core.constants import LOCAL_ID_PREFIX
from ticksight.core.logger import get_logger
from ticksight.models.sighting import Sighting
from ticksight.repository.protocol import FileRepositoryProtocol

from .base import BaseService

logger = get_logger(__name__)


def _epoch_millis() -> int:
    return int(time.time() * 1000)


class LocalCacheService(BaseService):
    """
    Durable store of user-submitted sightings.

    Local ids are ``local-<milliseconds>``. The numeric part is strictly
    increasing within one cache: if the clock has not advanced since the last
    save (or has gone backwards), the previous value plus one is used.
    """

    def __init__(
        self,
        file_repository: FileRepositoryProtocol,
        path: Union[str, Path],
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        """
        Initialize the cache service.

        Args:
            file_repository: Repository used for reading and writing the cache file
            path: Location of the cache file
            clock: Millisecond clock (default: wall clock); injectable for tests
        """
        super().__init__(file_repository)
        self.path = Path(path).expanduser()
        self._clock = clock or _epoch_millis
        self._last_stamp = 0

    def _next_id(self, existing: List[Sighting]) -> str:
        last = self._last_stamp
        for sighting in existing:
            if sighting.id.startswith(LOCAL_ID_PREFIX):
                suffix = sighting.id[len(LOCAL_ID_PREFIX):]
                if suffix.isdigit():
                    last = max(last, int(suffix))

        stamp = max(self._clock(), last + 1)
        self._last_stamp = stamp
        return f"{LOCAL_ID_PREFIX}{stamp}"

    def save(self, sighting: Sighting) -> Sighting:
        """
        Assign a local id, append the sighting, and persist the full collection.

        Returns:
            The stored copy carrying its new id
        """
        saved = self.load_all()
        stored = replace(sighting, id=self._next_id(saved))
        saved.append(stored)
        self._write(saved)
        logger.info(f"Saved sighting {stored.id} to local cache")
        return stored

    def load_all(self) -> List[Sighting]:
        """
        Return every cached sighting.

        A missing, unreadable, or corrupt cache yields an empty list.
        """
        if not self.file_repository.exists(self.path):
            return []

        try:
            raw = self.file_repository.read_text(self.path)
            data: Any = json.loads(raw) if raw.strip() else []
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable local cache {self.path}: {e}")
            return []

        if not isinstance(data, list):
            logger.warning(f"Ignoring local cache {self.path}: expected a JSON array")
            return []

        sightings = []
        for entry in data:
            if not isinstance(entry, dict):
                logger.warning(f"Skipping malformed cache entry: {entry!r}")
                continue
            sightings.append(Sighting.from_api_response(entry))

        if sightings:
            logger.info(f"Loaded {len(sightings)} local sightings from cache")
        return sightings

    def clear(self) -> int:
        """
        Delete the cache file.

        Returns:
            Number of sightings that were removed
        """
        count = len(self.load_all())
        if self.file_repository.exists(self.path):
            self.file_repository.delete_file(self.path)
        logger.info(f"Cleared {count} local sightings")
        return count

    def _write(self, sightings: List[Sighting]) -> None:
        payload = [s.to_api_payload() for s in sightings]
        self.file_repository.write_text(self.path, json.dumps(payload, indent=2))
