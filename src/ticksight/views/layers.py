"""
Presentation Layers
===================

The two views that display the filtered sightings: a marker layer (map
points) and a results list. Both are fed the same records on every render
and track the same selected id.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional, Protocol

from ticksight.core.constants import SEVERITY_COLORS
from ticksight.core.logger import get_logger
from ticksight.core.severity import normalize_severity
from ticksight.models.base import ToDictMixin
from ticksight.models.sighting import Sighting

logger = get_logger(__name__)

DEFAULT_RADIUS = 8
SELECTED_RADIUS = 12
DEFAULT_WEIGHT = 2
SELECTED_WEIGHT = 3


class SightingSink(Protocol):
    """A view that renders a sequence of sightings."""

    def render(self, records: Iterable[Sighting], now: Optional[datetime] = None) -> None:
        ...

    def highlight(self, sighting_id: Optional[str]) -> None:
        ...


@dataclass
class Marker(ToDictMixin):
    """A circle marker for one sighting."""

    sighting_id: str
    lat: float
    lng: float
    severity: str
    color: str
    radius: int = DEFAULT_RADIUS
    weight: int = DEFAULT_WEIGHT

    def set_selected(self, selected: bool) -> None:
        self.radius = SELECTED_RADIUS if selected else DEFAULT_RADIUS
        self.weight = SELECTED_WEIGHT if selected else DEFAULT_WEIGHT


@dataclass
class ResultCard(ToDictMixin):
    """A results-list entry for one sighting."""

    sighting_id: str
    species: str
    location: str
    date: str
    severity: str
    active: bool = False


class MarkerLayer:
    """Map markers for every sighting that has coordinates."""

    def __init__(self) -> None:
        self.markers: List[Marker] = []
        self.selected_id: Optional[str] = None

    def render(self, records: Iterable[Sighting], now: Optional[datetime] = None) -> None:
        self.markers = []
        for sighting in records:
            if not sighting.has_coordinates:
                logger.warning(f"Skipping sighting without coordinates: {sighting.id}")
                continue
            severity = normalize_severity(sighting.effective_severity(now))
            self.markers.append(
                Marker(
                    sighting_id=sighting.id,
                    lat=sighting.lat,
                    lng=sighting.lng,
                    severity=severity,
                    color=SEVERITY_COLORS.get(severity, SEVERITY_COLORS["Older"]),
                )
            )
        logger.debug(f"Added {len(self.markers)} markers to the map")
        self.highlight(self.selected_id)

    def find(self, sighting_id: str) -> Optional[Marker]:
        for marker in self.markers:
            if marker.sighting_id == sighting_id:
                return marker
        return None

    def highlight(self, sighting_id: Optional[str]) -> None:
        self.selected_id = sighting_id
        for marker in self.markers:
            marker.set_selected(marker.sighting_id == sighting_id)

    @property
    def ids(self) -> List[str]:
        return [m.sighting_id for m in self.markers]


class ResultsList:
    """Text cards for every filtered sighting."""

    empty_message = "No results found"

    def __init__(self) -> None:
        self.cards: List[ResultCard] = []
        self.selected_id: Optional[str] = None

    def render(self, records: Iterable[Sighting], now: Optional[datetime] = None) -> None:
        self.cards = [
            ResultCard(
                sighting_id=s.id,
                species=s.species,
                location=s.location,
                date=s.formatted_date,
                severity=normalize_severity(s.effective_severity(now)),
            )
            for s in records
        ]
        self.highlight(self.selected_id)

    def highlight(self, sighting_id: Optional[str]) -> None:
        self.selected_id = sighting_id
        for card in self.cards:
            card.active = card.sighting_id == sighting_id

    @property
    def ids(self) -> List[str]:
        return [c.sighting_id for c in self.cards]

    @property
    def is_empty(self) -> bool:
        return not self.cards
