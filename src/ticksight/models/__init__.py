"""Data models for TickSight."""

from ticksight.models.base import ToDictMixin
from ticksight.models.sighting import (
    FetchSummary,
    SeasonalActivity,
    Sighting,
    SightingDetails,
    SightingForm,
    SubmissionResult,
)

__all__ = [
    "FetchSummary",
    "SeasonalActivity",
    "Sighting",
    "SightingDetails",
    "SightingForm",
    "SubmissionResult",
    "ToDictMixin",
]
