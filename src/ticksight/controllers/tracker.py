# controllers/tracker.py
"""
Tracker Controller
==================

Application state for one tracker session.

The controller owns the record store, the active filter criteria, the
current selection, the loading flag, and the two presentation layers. Every
store change and every filter change re-renders the marker layer and the
results list together, from the same filtered records, so the two views
never diverge.

Example:
    from ticksight.controllers.tracker import TrackerController
    from ticksight.services import ServiceFactory

    controller = TrackerController(ServiceFactory())
    controller.initialize()
    controller.apply_filters(FilterCriteria(date_prefix="2024-11"))
    details = controller.select("02")
"""

from datetime import datetime
from typing import Callable, List, Optional

from ticksight.core.activity import location_timeline, seasonal_activity
from ticksight.core.filters import FilterCriteria, apply_filters
from ticksight.core.logger import get_logger
from ticksight.core.sharing import directions_url, share_message
from ticksight.core.store import RecordStore
from ticksight.models.sighting import (
    FetchSummary,
    SeasonalActivity,
    Sighting,
    SightingDetails,
    SightingForm,
    SubmissionResult,
)
from ticksight.services.base import ServiceResult
from ticksight.services.factory import ServiceFactory
from ticksight.views.layers import MarkerLayer, ResultsList

logger = get_logger(__name__)


class TrackerController:
    """
    Session controller wiring the store, filters, selection, and views.

    Attributes:
        store: Working set of sightings
        criteria: Active filter criteria
        selected_id: Id of the selected sighting, if any
        markers: Marker layer view
        results: Results list view
        loading: True while a fetch is in progress
    """

    def __init__(
        self,
        factory: ServiceFactory,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.factory = factory
        self.store: RecordStore = factory.store
        self.criteria = FilterCriteria()
        self.selected_id: Optional[str] = None
        self.markers = MarkerLayer()
        self.results = ResultsList()
        self.loading = False
        self._clock = clock or datetime.now

        self.store.subscribe(lambda _store: self.refresh())

    def now(self) -> datetime:
        return self._clock()

    def _loading_callback(self, on_loading: Optional[Callable[[bool], None]]) -> Callable[[bool], None]:
        def callback(loading: bool) -> None:
            self.loading = loading
            if on_loading:
                on_loading(loading)

        return callback

    def initialize(
        self, on_loading: Optional[Callable[[bool], None]] = None
    ) -> ServiceResult[FetchSummary]:
        """Fetch sightings (with retry, fallback and local merge) and render."""
        return self.factory.sightings.fetch_sightings(on_loading=self._loading_callback(on_loading))

    def visible(self) -> List[Sighting]:
        """Sightings matching the active criteria, in store order."""
        return apply_filters(self.store.records, self.criteria, now=self.now())

    def refresh(self) -> List[Sighting]:
        """Re-render both views from the active criteria."""
        visible = self.visible()
        now = self.now()
        self.markers.render(visible, now=now)
        self.results.render(visible, now=now)
        return visible

    def apply_filters(self, criteria: FilterCriteria) -> List[Sighting]:
        """Replace the active criteria and re-render both views."""
        self.criteria = criteria
        return self.refresh()

    def reset(self) -> List[Sighting]:
        """Clear filters and selection, then re-render."""
        self.criteria = FilterCriteria()
        self.clear_selection()
        return self.refresh()

    def clear_selection(self) -> None:
        self.selected_id = None
        self.markers.highlight(None)
        self.results.highlight(None)

    def species_options(self) -> List[str]:
        """Species filter options, in first-seen order."""
        return self.store.species()

    def details(self, sighting: Sighting) -> SightingDetails:
        return SightingDetails(
            sighting=sighting,
            severity=sighting.effective_severity(self.now()),
            date=sighting.formatted_date,
            time=sighting.formatted_time,
            latin_name=sighting.latin_name or "N/A",
            timeline=location_timeline(self.store.records, sighting.location),
        )

    def select(self, sighting_id: str) -> Optional[SightingDetails]:
        """
        Select a sighting and highlight it in both views.

        Returns:
            SightingDetails, or None if the id is not in the working set
        """
        sighting = self.store.get(str(sighting_id))
        if sighting is None:
            logger.debug(f"No sighting with id {sighting_id}")
            return None

        self.selected_id = sighting.id
        self.markers.highlight(sighting.id)
        self.results.highlight(sighting.id)
        return self.details(sighting)

    @property
    def selected(self) -> Optional[Sighting]:
        return self.store.get(self.selected_id) if self.selected_id else None

    def directions_url(self) -> Optional[str]:
        """Map search link for the selected sighting's location."""
        sighting = self.selected
        return directions_url(sighting.location) if sighting else None

    def share_text(self, page_url: str = "") -> Optional[str]:
        """Share text for the selected sighting, with the page URL if given."""
        sighting = self.selected
        if sighting is None:
            return None
        return share_message(sighting.location, page_url)

    def report(
        self, form: SightingForm, on_loading: Optional[Callable[[bool], None]] = None
    ) -> ServiceResult[SubmissionResult]:
        """Submit a new sighting; the views refresh through the store."""
        return self.factory.sightings.submit(form, on_loading=self._loading_callback(on_loading))

    def seasonal_activity(
        self, city: Optional[str] = None, year: Optional[str] = None
    ) -> SeasonalActivity:
        return seasonal_activity(self.store.records, city=city, year=year)
