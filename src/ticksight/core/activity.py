"""
Sighting Activity
=================

Aggregate views over the working set: the per-location timeline shown with a
selected sighting, and the monthly histogram behind the seasonal activity
chart.
"""

from datetime import datetime
from typing import Iterable, List, Optional

from ticksight.core.constants import MONTH_LABELS
from ticksight.core.severity import parse_date
from ticksight.models.sighting import SeasonalActivity, Sighting


def location_timeline(
    records: Iterable[Sighting],
    location: str,
    limit: int = 5,
) -> List[Sighting]:
    """
    Most recent sightings at a location, newest first.

    Returns an empty list when fewer than two sightings match.
    """
    at_location = [s for s in records if s.location == location]
    at_location.sort(key=lambda s: parse_date(s.date) or datetime.min, reverse=True)
    timeline = at_location[:limit]
    return timeline if len(timeline) > 1 else []


def seasonal_title(city: Optional[str] = None, year: Optional[str] = None) -> str:
    parts = ["Seasonal Activity"]
    if city:
        parts.append(f"- {city}")
    if year:
        parts.append(f"({year})")
    return " ".join(parts)


def seasonal_activity(
    records: Iterable[Sighting],
    city: Optional[str] = None,
    year: Optional[str] = None,
) -> SeasonalActivity:
    """
    Count sightings per calendar month.

    Args:
        records: Sightings to aggregate
        city: Only count sightings at this location
        year: Only count sightings whose date starts with this prefix

    Returns:
        SeasonalActivity with twelve monthly counts (Jan..Dec)
    """
    counts = [0] * 12
    for sighting in records:
        if city and sighting.location != city:
            continue
        if year and not sighting.date.startswith(year):
            continue
        parsed = parse_date(sighting.date)
        if parsed is None:
            continue
        counts[parsed.month - 1] += 1

    return SeasonalActivity(
        labels=list(MONTH_LABELS),
        counts=counts,
        title=seasonal_title(city, year),
        city=city or None,
        year=year or None,
    )
