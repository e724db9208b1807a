# services/__init__.py
"""
Services Package
================

Application services that orchestrate between views (CLI, controller) and
core sighting logic.

Architecture:
    View (CLI) / TrackerController
        ↓
    Service (SightingsService, LocalCacheService)
        ↓ (delegates to)
    Core (severity, filters, record store) + APIClient + file repository

Usage:
    from ticksight.services import ServiceFactory

    factory = ServiceFactory()
    result = factory.sightings.fetch_sightings()
    if result.success:
        print(f"{result.data.total} sightings from {result.data.source}")
"""

from .base import BaseService, ServiceResult
from .cache import LocalCacheService
from .factory import ServiceFactory
from .sightings import SightingsService, validate_form

__all__ = [
    "BaseService",
    "LocalCacheService",
    "ServiceFactory",
    "ServiceResult",
    "SightingsService",
    "validate_form",
]
