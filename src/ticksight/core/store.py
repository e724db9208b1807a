"""
Record Store
============

In-memory, ordered working set of sightings for one session.

The working set is replaced wholesale by ``load`` (remote data) or
``load_fallback`` (the built-in dataset), and supplemented by ``merge_local``,
which appends cached records whose ids are not already present. Merging never
removes or overwrites a loaded record. Listeners are notified after every
load or merge so both presentation sinks can re-render together.
"""

from typing import Callable, Iterable, List, Optional

from ticksight.core.logger import get_logger
from ticksight.models.sighting import Sighting

logger = get_logger(__name__)

StoreListener = Callable[["RecordStore"], None]

SOURCE_EMPTY = "empty"
SOURCE_REMOTE = "remote"
SOURCE_FALLBACK = "fallback"


class RecordStore:
    """
    Ordered collection of sightings with id-deduplicated merging.

    Example:
        >>> store = RecordStore()
        >>> store.load(remote_sightings)
        >>> added = store.merge_local(cached_sightings)
    """

    def __init__(self) -> None:
        self._records: List[Sighting] = []
        self._ids: set = set()
        self._listeners: List[StoreListener] = []
        self.source: str = SOURCE_EMPTY

    @property
    def records(self) -> List[Sighting]:
        """Copy of the working set, in order."""
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(list(self._records))

    def __contains__(self, sighting_id: object) -> bool:
        return sighting_id in self._ids

    def get(self, sighting_id: str) -> Optional[Sighting]:
        """Find a sighting by id."""
        for sighting in self._records:
            if sighting.id == sighting_id:
                return sighting
        return None

    def species(self) -> List[str]:
        """Unique species in first-seen order, for the species filter."""
        seen: List[str] = []
        for sighting in self._records:
            if sighting.species not in seen:
                seen.append(sighting.species)
        return seen

    def subscribe(self, listener: StoreListener) -> None:
        """Register a callback invoked after each load or merge."""
        self._listeners.append(listener)

    def load(self, records: Iterable[Sighting]) -> None:
        """Replace the working set with remote records."""
        self._replace(records)
        self.source = SOURCE_REMOTE
        logger.info(f"Loaded {len(self._records)} sightings from API")
        self._notify()

    def load_fallback(self, records: Iterable[Sighting]) -> None:
        """Replace the working set with the static fallback dataset."""
        self._replace(records)
        self.source = SOURCE_FALLBACK
        logger.info(f"Loaded {len(self._records)} fallback sightings")
        self._notify()

    def merge_local(self, cached: Iterable[Sighting]) -> int:
        """
        Append cached sightings whose ids are not already present.

        Already-loaded records win on id conflicts. New records keep their
        cache order.

        Returns:
            Number of sightings appended
        """
        added = 0
        for sighting in cached:
            if sighting.id in self._ids:
                continue
            self._records.append(sighting)
            self._ids.add(sighting.id)
            added += 1

        if added:
            logger.info(f"Merged {added} local sightings")
        self._notify()
        return added

    def _replace(self, records: Iterable[Sighting]) -> None:
        self._records = []
        self._ids = set()
        for sighting in records:
            if sighting.id in self._ids:
                logger.warning(f"Dropping duplicate sighting id {sighting.id}")
                continue
            self._records.append(sighting)
            self._ids.add(sighting.id)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self)
