"""Directions links and share text for a selected sighting location."""

from urllib.parse import quote

from ticksight.core.constants import MAPS_SEARCH_URL


def directions_url(location: str) -> str:
    """Map search URL for a UK location."""
    query = quote(f"{location}, UK", safe="!*'()")
    return f"{MAPS_SEARCH_URL}{query}"


def share_text(location: str) -> str:
    return f"Check out this tick sighting in {location}!"


def share_message(location: str, page_url: str = "") -> str:
    """Clipboard fallback text: the share text followed by the page URL."""
    text = share_text(location)
    return f"{text} {page_url}" if page_url else text
