"""
Severity Classification
=======================

Maps a sighting date to a coarse urgency bucket based on how many days have
elapsed since the sighting.

    elapsed <= 30    -> Recent
    elapsed <= 180   -> High
    elapsed <= 365   -> Medium
    elapsed <= 1825  -> Low
    otherwise        -> Older

Elapsed days are real-valued (not floored). Future dates give a negative
count and therefore classify as Recent. Dates that cannot be parsed fall
through every comparison and land in Older, unless ``strict=True`` is passed,
in which case InvalidDateError is raised.

Example:
    >>> from datetime import datetime
    >>> classify("2024-11-10T09:15:00", now=datetime(2024, 11, 20))
    'Recent'
"""

from datetime import datetime
from typing import Any, Optional

from ticksight.core.constants import (
    SEVERITY_ALIASES,
    SEVERITY_OLDER,
    SEVERITY_THRESHOLDS,
)
from ticksight.core.exceptions import InvalidDateError

SECONDS_PER_DAY = 24 * 60 * 60


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601-like sighting date.

    Timezone information is dropped so that every date compares as local
    wall-clock time.

    Returns:
        Naive datetime, or None if the value cannot be parsed
    """
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    return parsed.replace(tzinfo=None)


def elapsed_days(date: Any, now: Optional[datetime] = None) -> Optional[float]:
    """Real-valued days between ``date`` and ``now``; None if unparseable."""
    parsed = parse_date(date)
    if parsed is None:
        return None
    now = (now or datetime.now()).replace(tzinfo=None)
    return (now - parsed).total_seconds() / SECONDS_PER_DAY


def classify(date: Any, now: Optional[datetime] = None, strict: bool = False) -> str:
    """
    Classify a sighting date into a severity bucket.

    Args:
        date: ISO-8601-like date string
        now: Evaluation time (default: current local time)
        strict: Raise InvalidDateError instead of returning Older for bad dates

    Returns:
        One of Recent, High, Medium, Low, Older
    """
    days = elapsed_days(date, now)
    if days is None:
        if strict:
            raise InvalidDateError(date)
        return SEVERITY_OLDER

    for upper_bound, severity in SEVERITY_THRESHOLDS:
        if days <= upper_bound:
            return severity
    return SEVERITY_OLDER


def normalize_severity(value: Optional[str]) -> Optional[str]:
    """Map alias spellings (``Med``) onto canonical names; pass others through."""
    if value is None:
        return None
    return SEVERITY_ALIASES.get(value, value)
