# services/sightings.py
"""
Service for retrieving and reporting tick sightings.

Retrieval tries the primary endpoint, then exactly one alternate endpoint,
then falls back to the built-in dataset. Whichever path succeeds, locally
cached sightings are merged on top afterwards.

Reporting validates the form, posts it to the service, and on any failure
keeps the sighting in the local cache instead.

Example:
    >>> service = SightingsService(client, cache, store)
    >>> result = service.fetch_sightings()
    >>> print(result.data.source, result.data.total)
    primary 42
"""

from dataclasses import replace
from typing import Callable, Dict, List, Optional

import requests

from ticksight.core.config import Config, get_default_config
from ticksight.core.constants import (
    ALTERNATE_SIGHTINGS_ENDPOINT,
    DEFAULT_LOCATION,
    LOCATION_COORDINATES,
    MAX_IMAGE_BYTES,
    SEVERITY_LEVELS,
    SIGHTINGS_ENDPOINT,
    get_latin_name,
)
from ticksight.core.exceptions import FetchError, FormatError, SubmissionError, ValidationError
from ticksight.core.fallback import fallback_sightings
from ticksight.core.http import APIClient
from ticksight.core.logger import get_logger
from ticksight.core.severity import normalize_severity
from ticksight.core.store import RecordStore
from ticksight.models.sighting import FetchSummary, Sighting, SightingForm, SubmissionResult

from .base import BaseService, ServiceResult
from .cache import LocalCacheService

logger = get_logger(__name__)

SOURCE_PRIMARY = "primary"
SOURCE_ALTERNATE = "alternate"
SOURCE_FALLBACK = "fallback"

REMOTE_SUCCESS_MESSAGE = "Sighting reported successfully!"
LOCAL_SAVE_MESSAGE = "Sighting saved locally! (API unavailable)"

LoadingCallback = Callable[[bool], None]


def validate_form(form: SightingForm, max_image_bytes: int = MAX_IMAGE_BYTES) -> None:
    """
    Validate a report form.

    Raises:
        ValidationError: With one message per offending field
    """
    errors: Dict[str, str] = {}
    summary = "Please correct the highlighted fields."

    if not form.date.strip():
        errors["date"] = "Date is required"
    if not form.time.strip():
        errors["time"] = "Time is required"
    if not form.location.strip():
        errors["location"] = "Location is required"
    if not form.species.strip():
        errors["species"] = "Please select a species"

    severity = form.severity.strip()
    if not severity:
        errors["severity"] = "Please select severity"
    elif normalize_severity(severity) not in SEVERITY_LEVELS:
        errors["severity"] = f"Unknown severity: {severity}"

    if form.image_size is not None and form.image_size > max_image_bytes:
        errors["image"] = "Image size must be less than 5MB"
        summary = errors["image"]

    if errors:
        raise ValidationError(errors, message=summary)


def parse_sightings_payload(data: object, url: Optional[str] = None) -> List[Sighting]:
    """
    Extract sightings from a response body.

    Accepts a bare array or an object with a ``sightings`` array.

    Raises:
        FormatError: For any other shape
    """
    if isinstance(data, list):
        items = data
    elif isinstance(data, dict) and isinstance(data.get("sightings"), list):
        items = data["sightings"]
    else:
        raise FormatError(url=url)

    sightings = []
    for item in items:
        if not isinstance(item, dict):
            logger.warning(f"Skipping malformed sighting from API: {item!r}")
            continue
        sightings.append(Sighting.from_api_response(item))

    # Records without an id get remote-<index>, skipping ids the payload uses
    taken = {s.id for s in sightings if s.id}
    for index, sighting in enumerate(sightings):
        if sighting.id:
            continue
        candidate = f"remote-{index}"
        while candidate in taken:
            candidate += "-"
        sighting.id = candidate
        taken.add(candidate)
        logger.debug(f"Assigned id {candidate} to sighting without an id")
    return sightings


class SightingsService(BaseService):
    """
    Service for sighting retrieval and submission.

    Provides high-level methods for:
    - Fetching sightings with alternate-endpoint retry and static fallback
    - Merging locally cached sightings into the working set
    - Validating and submitting new sightings, with local-cache fallback
    """

    def __init__(
        self,
        client: APIClient,
        cache: LocalCacheService,
        store: RecordStore,
        config: Optional[Config] = None,
    ) -> None:
        super().__init__(cache.file_repository)
        self.client = client
        self.cache = cache
        self.store = store
        self.config = config or get_default_config()

    @property
    def sightings_endpoint(self) -> str:
        return self.config.get("api", "sightings_endpoint", SIGHTINGS_ENDPOINT)

    @property
    def alternate_endpoint(self) -> str:
        return self.config.get("api", "alternate_endpoint", ALTERNATE_SIGHTINGS_ENDPOINT)

    def _fetch_endpoint(self, endpoint: str) -> List[Sighting]:
        """GET one endpoint, converting every failure into FetchError/FormatError."""
        url = self.client.url_for(endpoint)
        try:
            data = self.client.get(endpoint)
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise FetchError(f"API Error: {status}", url=url, status=status) from e
        except requests.JSONDecodeError as e:
            raise FormatError(f"Response is not valid JSON: {e}", url=url) from e
        except requests.RequestException as e:
            raise FetchError(f"Request failed: {e}", url=url) from e
        except ValueError as e:
            raise FormatError(f"Response is not valid JSON: {e}", url=url) from e

        return parse_sightings_payload(data, url=url)

    def fetch_sightings(
        self, on_loading: Optional[LoadingCallback] = None
    ) -> ServiceResult[FetchSummary]:
        """
        Load sightings into the store and merge the local cache on top.

        Args:
            on_loading: Called with True before fetching and False when done,
                        whatever the outcome.

        Returns:
            ServiceResult with FetchSummary. Always successful; falling back to
            the built-in dataset adds a warning.
        """
        warnings: List[str] = []
        if on_loading:
            on_loading(True)

        try:
            source = SOURCE_PRIMARY
            try:
                records = self._fetch_endpoint(self.sightings_endpoint)
            except FetchError as e:
                logger.warning(f"Error fetching sightings: {e.message}")
                logger.info("Attempting to load from API with alternative endpoint...")
                try:
                    records = self._fetch_endpoint(self.alternate_endpoint)
                    source = SOURCE_ALTERNATE
                except FetchError as alt_error:
                    logger.error(f"Alternative endpoint also failed: {alt_error.message}")
                    records = None

            if records is None:
                logger.warning("Using fallback sample data")
                records = fallback_sightings()
                source = SOURCE_FALLBACK
                self.store.load_fallback(records)
                warnings.append("Sightings API unavailable; showing sample data")
            else:
                logger.info(f"Loaded {len(records)} sightings from {source} endpoint")
                self.store.load(records)

            merged = self.store.merge_local(self.cache.load_all())
        finally:
            if on_loading:
                on_loading(False)

        summary = FetchSummary(
            source=source,
            loaded=len(records),
            merged=merged,
            total=len(self.store),
        )
        return ServiceResult.ok(
            data=summary,
            message=f"Loaded {summary.total} sightings ({source})",
            warnings=warnings,
        )

    def build_sighting(self, form: SightingForm) -> Sighting:
        """Turn a validated form into a sighting (no id yet)."""
        location = form.location.strip()
        default_location = self.config.get("submission", "default_location", DEFAULT_LOCATION)
        lat, lng = LOCATION_COORDINATES.get(
            location,
            LOCATION_COORDINATES.get(default_location, LOCATION_COORDINATES[DEFAULT_LOCATION]),
        )
        species = form.species.strip()
        return Sighting(
            id="",
            date=f"{form.date.strip()}T{form.time.strip()}",
            location=location,
            species=species,
            latin_name=get_latin_name(species),
            severity=normalize_severity(form.severity.strip()),
            lat=lat,
            lng=lng,
            notes=form.notes.strip() or None,
        )

    def _post(self, sighting: Sighting) -> Sighting:
        try:
            response = self.client.post(
                self.sightings_endpoint, json_data=sighting.to_api_payload(include_id=False)
            )
        except requests.RequestException as e:
            raise SubmissionError(f"API submission failed: {e}") from e

        if isinstance(response, dict) and response.get("id") is not None:
            return replace(sighting, id=str(response["id"]))
        return sighting

    def submit(
        self,
        form: SightingForm,
        on_loading: Optional[LoadingCallback] = None,
    ) -> ServiceResult[SubmissionResult]:
        """
        Validate and report a sighting.

        Invalid forms fail without any network or cache write. A failed post
        is not an error: the sighting is kept in the local cache and merged
        into the working set.

        Returns:
            ServiceResult with SubmissionResult, or a failure whose
            ``metadata["errors"]`` maps field names to messages
        """
        max_image_bytes = self.config.get("submission", "max_image_bytes", MAX_IMAGE_BYTES)
        try:
            validate_form(form, max_image_bytes=max_image_bytes)
        except ValidationError as e:
            return ServiceResult.fail(e.message, errors=e.errors)

        sighting = self.build_sighting(form)

        try:
            posted = self._post(sighting)
        except SubmissionError as e:
            logger.error(f"Error submitting sighting: {e.message}")
            try:
                stored = self.cache.save(sighting)
            except OSError as save_error:
                return ServiceResult.fail(f"Could not save sighting locally: {save_error}")
            self.store.merge_local(self.cache.load_all())
            return ServiceResult.ok(
                data=SubmissionResult(sighting=stored, saved_remotely=False, message=LOCAL_SAVE_MESSAGE),
                message=LOCAL_SAVE_MESSAGE,
                warnings=[e.message],
            )

        self.fetch_sightings(on_loading=on_loading)
        return ServiceResult.ok(
            data=SubmissionResult(sighting=posted, saved_remotely=True, message=REMOTE_SUCCESS_MESSAGE),
            message=REMOTE_SUCCESS_MESSAGE,
        )
