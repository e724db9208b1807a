"""Controllers coordinating services and views for a tracker session."""

from ticksight.controllers.tracker import TrackerController

__all__ = ["TrackerController"]
