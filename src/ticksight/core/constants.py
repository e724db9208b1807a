"""
Constants
=========

Fixed lookup tables and defaults shared across ticksight.
"""

from typing import Dict, Tuple

# Remote service
DEFAULT_API_BASE_URL = "https://dev-task.elancoapps.com"
SIGHTINGS_ENDPOINT = "/sightings"
ALTERNATE_SIGHTINGS_ENDPOINT = "/api/sightings"

# Severity buckets, most urgent first
SEVERITY_RECENT = "Recent"
SEVERITY_HIGH = "High"
SEVERITY_MEDIUM = "Medium"
SEVERITY_LOW = "Low"
SEVERITY_OLDER = "Older"

SEVERITY_LEVELS: Tuple[str, ...] = (
    SEVERITY_RECENT,
    SEVERITY_HIGH,
    SEVERITY_MEDIUM,
    SEVERITY_LOW,
    SEVERITY_OLDER,
)

# Upper bounds (inclusive, in elapsed days) for each bucket except the last
SEVERITY_THRESHOLDS: Tuple[Tuple[float, str], ...] = (
    (30, SEVERITY_RECENT),
    (180, SEVERITY_HIGH),
    (365, SEVERITY_MEDIUM),
    (1825, SEVERITY_LOW),
)

# Alternate spellings seen in remote data and older UI tables
SEVERITY_ALIASES: Dict[str, str] = {
    "Med": SEVERITY_MEDIUM,
}

SEVERITY_COLORS: Dict[str, str] = {
    SEVERITY_LOW: "#43A047",
    SEVERITY_MEDIUM: "#FFB300",
    SEVERITY_HIGH: "#E53935",
    SEVERITY_OLDER: "#7E57C2",
    SEVERITY_RECENT: "#656a71",
}

# Common name -> Latin name
SPECIES_LATIN_NAMES: Dict[str, str] = {
    "Marsh tick": "Ixodes apronophorus",
    "Southern rodent tick": "Ixodes acuminatus",
    "Passerine tick": "Dermacentor frontalis",
    "Fox/badger tick": "Ixodes canisuga",
    "Tree-hole tick": "Ixodes arboricola",
}
UNKNOWN_LATIN_NAME = "Unknown"

# City centroids used to place submitted sightings (no geocoding)
LOCATION_COORDINATES: Dict[str, Tuple[float, float]] = {
    "London": (51.5074, -0.1278),
    "Manchester": (53.4808, -2.2426),
    "Glasgow": (55.8642, -4.2518),
    "Birmingham": (52.4862, -1.8904),
    "Liverpool": (53.4084, -2.9916),
    "Edinburgh": (55.9533, -3.1883),
    "Leeds": (53.8008, -1.5491),
    "Bristol": (51.4545, -2.5879),
    "Sheffield": (53.3811, -1.4701),
    "Newcastle": (54.9783, -1.6178),
    "Cardiff": (51.4816, -3.1791),
    "Nottingham": (52.9548, -1.1581),
    "Southampton": (50.9097, -1.4044),
    "Leicester": (52.6369, -1.1398),
    "Oxford": (51.7520, -1.2577),
    "Cambridge": (52.2053, 0.1218),
    "Brighton": (50.8225, -0.1372),
    "Plymouth": (50.3755, -4.1427),
    "Aberdeen": (57.1497, -2.0943),
    "Inverness": (57.4778, -4.2247),
    "York": (53.9591, -1.0815),
    "Bath": (51.3758, -2.3599),
}
DEFAULT_LOCATION = "London"

# Local cache
LOCAL_ID_PREFIX = "local-"
DEFAULT_CACHE_PATH = "~/.local/share/ticksight/tick_sightings.json"

# Submission
MAX_IMAGE_BYTES = 5 * 1024 * 1024

# Sharing
MAPS_SEARCH_URL = "https://www.google.com/maps/search/"
SHARE_TITLE = "UK Tick Sighting"

MONTH_LABELS: Tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def get_latin_name(species: str) -> str:
    """Look up the Latin name for a common species name."""
    return SPECIES_LATIN_NAMES.get(species, UNKNOWN_LATIN_NAME)
