"""Presentation layers for filtered sightings."""

from ticksight.views.layers import Marker, MarkerLayer, ResultCard, ResultsList, SightingSink

__all__ = [
    "Marker",
    "MarkerLayer",
    "ResultCard",
    "ResultsList",
    "SightingSink",
]
