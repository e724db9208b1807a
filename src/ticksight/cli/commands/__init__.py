"""CLI command modules for ticksight."""

from .cache import cache
from .config import config
from .sightings import activity, list_sightings, list_species, report_sighting, share, show_sighting

__all__ = [
    "activity",
    "cache",
    "config",
    "list_sightings",
    "list_species",
    "report_sighting",
    "share",
    "show_sighting",
]
