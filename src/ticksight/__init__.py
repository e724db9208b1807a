"""
TickSight - UK Tick Sightings Tracker
=====================================

Version: 0.1.0
"""

__version__ = "0.1.0"

from ticksight.core.filters import FilterCriteria, apply_filters
from ticksight.core.severity import classify, normalize_severity
from ticksight.models.sighting import Sighting

__all__ = [
    "__version__",
    "FilterCriteria",
    "Sighting",
    "apply_filters",
    "classify",
    "normalize_severity",
]
