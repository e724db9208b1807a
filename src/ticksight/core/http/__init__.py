"""
HTTP Client Utilities
=====================

Provides reusable HTTP client functionality for the sightings service.
"""

from .client import APIClient

__all__ = [
    "APIClient",
]
