"""
Sighting Filters
================

Conjunctive filtering over the working set. Every supplied criterion must
match; absent (or empty) criteria impose no constraint. Input order is
preserved.

    date_prefix  textual prefix of the date string ("2024", "2024-11")
    species      exact match on the common name
    severity     match on effective severity, with Med/Medium treated as equal
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional

from ticksight.core.severity import normalize_severity
from ticksight.models.base import ToDictMixin
from ticksight.models.sighting import Sighting


@dataclass
class FilterCriteria(ToDictMixin):
    """Optional filter values; empty strings count as absent."""

    date_prefix: Optional[str] = None
    species: Optional[str] = None
    severity: Optional[str] = None

    def __post_init__(self) -> None:
        self.date_prefix = self.date_prefix or None
        self.species = self.species or None
        self.severity = normalize_severity(self.severity or None)

    @property
    def is_empty(self) -> bool:
        return not (self.date_prefix or self.species or self.severity)


def matches(sighting: Sighting, criteria: FilterCriteria, now: Optional[datetime] = None) -> bool:
    """Check a single sighting against every supplied criterion."""
    if criteria.date_prefix and not sighting.date.startswith(criteria.date_prefix):
        return False
    if criteria.species and sighting.species != criteria.species:
        return False
    if criteria.severity:
        effective = normalize_severity(sighting.effective_severity(now))
        if effective != normalize_severity(criteria.severity):
            return False
    return True


def apply_filters(
    records: Iterable[Sighting],
    criteria: Optional[FilterCriteria] = None,
    now: Optional[datetime] = None,
) -> List[Sighting]:
    """
    Filter sightings, keeping their relative order.

    Args:
        records: Sightings to filter
        criteria: Filter values (None means no filtering)
        now: Evaluation time for derived severities

    Returns:
        New list of matching sightings
    """
    if criteria is None or criteria.is_empty:
        return list(records)
    return [s for s in records if matches(s, criteria, now)]
