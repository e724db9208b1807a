"""Command-line interface for ticksight."""

from .cli import cli

__all__ = ["cli"]
