# models/sighting.py
"""
Data models for tick sightings.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ticksight.core.logger import get_logger
from ticksight.core.severity import classify, normalize_severity, parse_date

from .base import ToDictMixin

logger = get_logger(__name__)


def _coerce_coordinate(value: Any) -> Optional[float]:
    """Convert a wire coordinate to float; None (not 0) means absent."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.debug(f"Ignoring non-numeric coordinate: {value!r}")
        return None


def _first_present(data: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text else None


@dataclass
class Sighting(ToDictMixin):
    """
    A single tick observation.

    Attributes:
        id: Identifier, unique within the working set. Server ids are coerced
            to strings; locally saved records use a ``local-`` prefix.
        date: ISO-8601-like timestamp string, kept verbatim.
        location: Free-text place name.
        species: Common species name.
        latin_name: Latin species name, if known.
        severity: Stored severity (already normalized), if the source had one.
        lat: Latitude, None when absent. 0.0 is a valid value.
        lng: Longitude, None when absent. 0.0 is a valid value.
        notes: Free-text notes.
        time: Display time supplied by the source, if any.
    """

    id: str
    date: str
    location: str = ""
    species: str = ""
    latin_name: Optional[str] = None
    severity: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    notes: Optional[str] = None
    time: Optional[str] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "Sighting":
        """Create from a remote or cached record dictionary."""
        return cls(
            id=_optional_str(data.get("id")) or "",
            date=str(data.get("date") or ""),
            location=str(data.get("location") or ""),
            species=str(data.get("species") or ""),
            latin_name=_optional_str(data.get("latinName")),
            severity=normalize_severity(_optional_str(data.get("severity"))),
            lat=_coerce_coordinate(_first_present(data, "lat", "latitude")),
            lng=_coerce_coordinate(_first_present(data, "lng", "longitude")),
            notes=_optional_str(data.get("notes")),
            time=_optional_str(data.get("time")),
        )

    def to_api_payload(self, include_id: bool = True) -> Dict[str, Any]:
        """Serialize using the remote service's field names."""
        payload: Dict[str, Any] = {}
        if include_id and self.id:
            payload["id"] = self.id
        payload.update(
            {
                "date": self.date,
                "location": self.location,
                "species": self.species,
            }
        )
        optional = {
            "latinName": self.latin_name,
            "severity": self.severity,
            "notes": self.notes,
            "time": self.time,
            "lat": self.lat,
            "lng": self.lng,
        }
        payload.update({k: v for k, v in optional.items() if v is not None})
        return payload

    @property
    def has_coordinates(self) -> bool:
        """True when both coordinates are present (zero counts as present)."""
        return self.lat is not None and self.lng is not None

    def effective_severity(self, now: Optional[datetime] = None) -> str:
        """Stored severity if present, otherwise derived from the date."""
        if self.severity:
            return self.severity
        return classify(self.date, now=now)

    @property
    def formatted_date(self) -> str:
        """Date part for display, or the raw string if unparseable."""
        parsed = parse_date(self.date)
        return parsed.strftime("%d/%m/%Y") if parsed else self.date

    @property
    def formatted_time(self) -> str:
        """Source-supplied time, else the time part of the date."""
        if self.time:
            return self.time
        parsed = parse_date(self.date)
        return parsed.strftime("%H:%M:%S") if parsed else ""


@dataclass
class FetchSummary(ToDictMixin):
    """
    Outcome of a sightings fetch.

    Attributes:
        source: Which path supplied the records: primary, alternate, or fallback.
        loaded: Records loaded from that source.
        merged: Locally cached records appended afterwards.
        total: Size of the working set after merging.
    """

    source: str
    loaded: int
    merged: int
    total: int


@dataclass
class SightingForm(ToDictMixin):
    """Raw values from the report-sighting form."""

    date: str = ""
    time: str = ""
    location: str = ""
    species: str = ""
    severity: str = ""
    notes: str = ""
    image_path: Optional[str] = None
    image_size: Optional[int] = None


@dataclass
class SubmissionResult(ToDictMixin):
    """Outcome of a sighting report."""

    sighting: Sighting
    saved_remotely: bool
    message: str


@dataclass
class SightingDetails(ToDictMixin):
    """Everything shown when a sighting is selected."""

    sighting: Sighting
    severity: str
    date: str
    time: str
    latin_name: str
    timeline: List[Sighting] = field(default_factory=list)

    @property
    def show_timeline(self) -> bool:
        return len(self.timeline) > 1


@dataclass
class SeasonalActivity(ToDictMixin):
    """Monthly sighting counts for the seasonal activity chart."""

    labels: List[str]
    counts: List[int]
    title: str
    city: Optional[str] = None
    year: Optional[str] = None

    @property
    def total(self) -> int:
        return sum(self.counts)
