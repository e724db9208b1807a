"""
CLI Service Helpers
===================

CLI-specific utilities for working with services and the ServiceFactory.

This module provides convenience functions for CLI commands to:
1. Access a singleton ServiceFactory instance
2. Share one TrackerController per factory
3. Handle service result errors consistently

ServiceFactory is not imported until first service access, so
``ticksight --help`` does not pull in requests or matplotlib.

Usage:
    from ticksight.cli.service_helpers import get_tracker, handle_result, services

    tracker = get_tracker()
    handle_result(tracker.initialize())

    cached = services.cache.load_all()
"""

from typing import TYPE_CHECKING, TypeVar

import click

if TYPE_CHECKING:
    from ticksight.controllers.tracker import TrackerController
    from ticksight.services import ServiceFactory
    from ticksight.services.base import ServiceResult
    from ticksight.services.cache import LocalCacheService

T = TypeVar("T")


# ============================================================================
# Singleton Factory Instance
# ============================================================================

_factory: "ServiceFactory | None" = None
_tracker: "TrackerController | None" = None


def get_factory() -> "ServiceFactory":
    """
    Get the singleton ServiceFactory instance for CLI.

    This is lazily initialized on first access. For testing or custom
    configurations, use set_factory() to inject a custom instance.
    """
    global _factory
    if _factory is None:
        from ticksight.services import ServiceFactory

        _factory = ServiceFactory()
    return _factory


def set_factory(factory: "ServiceFactory") -> None:
    """
    Set a custom ServiceFactory instance.

    Example:
        # In tests
        mock_repo = MockFileRepository()
        set_factory(ServiceFactory(file_repository=mock_repo, client=mock_client))
    """
    global _factory, _tracker
    _factory = factory
    _tracker = None


def get_tracker() -> "TrackerController":
    """Get the TrackerController bound to the current factory."""
    global _tracker
    if _tracker is None:
        from ticksight.controllers.tracker import TrackerController

        _tracker = TrackerController(get_factory())
    return _tracker


class _ServiceAccessor:
    """
    Lazy accessor for services that provides type hints and autocomplete.
    """

    @property
    def cache(self) -> "LocalCacheService":
        """Get LocalCacheService instance."""
        return get_factory().cache


services = _ServiceAccessor()


# ============================================================================
# Result Handling Utilities
# ============================================================================


def handle_result(result: "ServiceResult[T]") -> T:
    """
    Handle a service result, exiting with error if failed.

    Args:
        result: Service result to handle

    Returns:
        The result data if successful

    Raises:
        SystemExit: If result indicates failure (exits with code 1)
    """
    if not result.success:
        exit_with_error(result.error or "Unknown error")
    return result.data


def exit_with_error(message: str, code: int = 1) -> None:
    """
    Print error message and exit.

    Raises:
        SystemExit: Always exits with specified code
    """
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(code)


def reset_factory() -> None:
    """Reset the singleton factory instance (for testing)."""
    global _factory, _tracker
    _factory = None
    _tracker = None


__all__ = [
    "services",
    "get_factory",
    "set_factory",
    "get_tracker",
    "handle_result",
    "exit_with_error",
    "reset_factory",
]
