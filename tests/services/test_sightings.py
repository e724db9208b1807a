"""
Tests for SightingsService.
"""

import json
from datetime import datetime

import pytest
import requests

from ticksight.core.exceptions import ValidationError
from ticksight.core.store import SOURCE_FALLBACK as STORE_FALLBACK
from ticksight.models.sighting import SightingForm
from ticksight.services.sightings import (
    LOCAL_SAVE_MESSAGE,
    REMOTE_SUCCESS_MESSAGE,
    SOURCE_ALTERNATE,
    SOURCE_FALLBACK,
    SOURCE_PRIMARY,
    parse_sightings_payload,
    validate_form,
)
from tests.conftest import http_error
from tests.services.conftest import CACHE_PATH


@pytest.fixture
def form():
    return SightingForm(
        date="2024-11-19",
        time="14:30",
        location="York",
        species="Marsh tick",
        severity="Recent",
        notes="  Found on a walk  ",
    )


class TestValidateForm:
    """Tests for validate_form function."""

    def test_valid_form(self, form):
        validate_form(form)

    def test_empty_species_is_the_only_error(self, form):
        form.species = ""
        with pytest.raises(ValidationError) as exc_info:
            validate_form(form)
        assert exc_info.value.errors == {"species": "Please select a species"}

    def test_whitespace_counts_as_empty(self, form):
        form.location = "   "
        with pytest.raises(ValidationError) as exc_info:
            validate_form(form)
        assert exc_info.value.errors == {"location": "Location is required"}

    def test_all_fields_missing(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_form(SightingForm())
        assert set(exc_info.value.errors) == {"date", "time", "location", "species", "severity"}

    def test_unknown_severity(self, form):
        form.severity = "Extreme"
        with pytest.raises(ValidationError) as exc_info:
            validate_form(form)
        assert exc_info.value.errors == {"severity": "Unknown severity: Extreme"}

    def test_med_alias_accepted(self, form):
        form.severity = "Med"
        validate_form(form)

    def test_image_too_large(self, form):
        form.image_size = 5 * 1024 * 1024 + 1
        with pytest.raises(ValidationError) as exc_info:
            validate_form(form)
        assert exc_info.value.message == "Image size must be less than 5MB"

    def test_image_at_limit(self, form):
        form.image_size = 5 * 1024 * 1024
        validate_form(form)


class TestParsePayload:
    """Tests for parse_sightings_payload function."""

    def test_bare_array(self, sighting_payload):
        assert [s.id for s in parse_sightings_payload(sighting_payload)] == ["101", "102"]

    def test_wrapped_array(self, sighting_payload):
        result = parse_sightings_payload({"sightings": sighting_payload})
        assert len(result) == 2

    def test_records_without_ids_are_all_kept(self, store):
        records = [
            {"date": "2024-11-01", "location": "Leeds", "species": "Marsh tick"},
            {"date": "2024-11-02", "location": "Hull", "species": "Marsh tick"},
            {"id": None, "date": "2024-11-03", "location": "Bath", "species": "Marsh tick"},
            {"id": None, "date": "2024-11-04", "location": "York", "species": "Marsh tick"},
        ]

        store.load(parse_sightings_payload(records))

        assert len(store) == 4
        assert [s.id for s in store.records] == ["remote-0", "remote-1", "remote-2", "remote-3"]

    def test_generated_ids_avoid_existing_ids(self):
        records = [
            {"date": "2024-11-01", "location": "Leeds"},
            {"id": "remote-0", "date": "2024-11-02", "location": "Hull"},
        ]

        ids = [s.id for s in parse_sightings_payload(records)]

        assert len(set(ids)) == 2
        assert "remote-0" in ids

    @pytest.mark.parametrize("data", [{"data": []}, "text", None, 5])
    def test_other_shapes_rejected(self, data):
        from ticksight.core.exceptions import FormatError

        with pytest.raises(FormatError) as exc_info:
            parse_sightings_payload(data)
        assert exc_info.value.message == "Invalid data format from API."


class TestFetchSightings:
    """Tests for SightingsService.fetch_sightings."""

    def test_primary_success(self, service, mock_client, sighting_payload, store):
        mock_client.get.return_value = sighting_payload

        result = service.fetch_sightings()

        assert result.success is True
        assert result.data.source == SOURCE_PRIMARY
        assert result.data.total == 2
        assert result.warnings == []
        mock_client.get.assert_called_once_with("/sightings")
        assert [s.id for s in store] == ["101", "102"]

    def test_alternate_after_primary_failure(self, service, mock_client, sighting_payload):
        mock_client.get.side_effect = [http_error(500), {"sightings": sighting_payload}]

        result = service.fetch_sightings()

        assert result.data.source == SOURCE_ALTERNATE
        assert [c.args[0] for c in mock_client.get.call_args_list] == ["/sightings", "/api/sightings"]

    def test_format_error_takes_retry_path(self, service, mock_client, sighting_payload):
        mock_client.get.side_effect = [{"unexpected": True}, sighting_payload]
        assert service.fetch_sightings().data.source == SOURCE_ALTERNATE

    def test_invalid_json_takes_retry_path(self, service, mock_client, sighting_payload):
        mock_client.get.side_effect = [ValueError("Expecting value"), sighting_payload]
        assert service.fetch_sightings().data.source == SOURCE_ALTERNATE

    def test_fallback_after_both_fail(self, service, mock_client, store):
        mock_client.get.side_effect = [http_error(500), requests.ConnectionError("down")]

        result = service.fetch_sightings()

        assert result.success is True
        assert result.data.source == SOURCE_FALLBACK
        assert result.data.total == 55
        assert result.warnings == ["Sightings API unavailable; showing sample data"]
        assert store.source == STORE_FALLBACK
        assert mock_client.get.call_count == 2

    def test_fallback_includes_historical_records(self, service, mock_client, store):
        mock_client.get.side_effect = requests.ConnectionError("down")
        service.fetch_sightings()

        historical = [store.get(i) for i in ("43", "44", "45")]
        assert [s.location for s in historical] == ["Oxford", "Cambridge", "Brighton"]
        assert all(s.effective_severity(datetime(2029, 1, 1)) == "Older" for s in historical)

    def test_local_cache_merged_after_remote(self, service, mock_client, mock_repository, sighting_payload, store):
        mock_repository.files[CACHE_PATH] = json.dumps(
            [{"id": "local-1", "date": "2024-11-19", "location": "York", "species": "Marsh tick"}]
        )
        mock_client.get.return_value = sighting_payload

        result = service.fetch_sightings()

        assert result.data.merged == 1
        assert [s.id for s in store][-1] == "local-1"

    def test_local_cache_merged_after_fallback(self, service, mock_client, mock_repository, store):
        mock_repository.files[CACHE_PATH] = json.dumps([{"id": "local-1", "date": "2024-11-19"}])
        mock_client.get.side_effect = requests.Timeout("slow")

        result = service.fetch_sightings()

        assert result.data.total == 56
        assert "local-1" in store

    def test_loading_cleared_on_success(self, service, mock_client, mocker, sighting_payload):
        mock_client.get.return_value = sighting_payload
        on_loading = mocker.Mock()

        service.fetch_sightings(on_loading=on_loading)

        assert [c.args[0] for c in on_loading.call_args_list] == [True, False]

    def test_loading_cleared_on_fallback(self, service, mock_client, mocker):
        mock_client.get.side_effect = http_error(503)
        on_loading = mocker.Mock()

        service.fetch_sightings(on_loading=on_loading)

        on_loading.assert_called_with(False)

    def test_loading_cleared_on_unexpected_error(self, service, mock_client, mocker, sighting_payload):
        mock_client.get.return_value = sighting_payload
        mocker.patch.object(service.cache, "load_all", side_effect=RuntimeError("boom"))
        on_loading = mocker.Mock()

        with pytest.raises(RuntimeError):
            service.fetch_sightings(on_loading=on_loading)
        on_loading.assert_called_with(False)


class TestSubmit:
    """Tests for SightingsService.submit."""

    def test_validation_failure_blocks_submission(self, service, mock_client, mock_repository, form):
        form.species = ""

        result = service.submit(form)

        assert result.success is False
        assert result.metadata["errors"] == {"species": "Please select a species"}
        mock_client.post.assert_not_called()
        assert mock_repository.writes == []

    def test_remote_success_refetches(self, service, mock_client, form, sighting_payload):
        mock_client.post.return_value = {"id": 900}
        mock_client.get.return_value = sighting_payload

        result = service.submit(form)

        assert result.success is True
        assert result.message == REMOTE_SUCCESS_MESSAGE
        assert result.data.saved_remotely is True
        assert result.data.sighting.id == "900"
        mock_client.get.assert_called_once_with("/sightings")

    def test_posted_payload(self, service, mock_client, form, sighting_payload):
        mock_client.post.return_value = None
        mock_client.get.return_value = sighting_payload

        service.submit(form)

        endpoint = mock_client.post.call_args.args[0]
        payload = mock_client.post.call_args.kwargs["json_data"]
        assert endpoint == "/sightings"
        assert "id" not in payload
        assert payload["date"] == "2024-11-19T14:30"
        assert payload["latinName"] == "Ixodes apronophorus"
        assert payload["notes"] == "Found on a walk"
        assert (payload["lat"], payload["lng"]) == (53.9591, -1.0815)

    def test_unknown_location_uses_default_coordinates(self, service, mock_client, form, sighting_payload):
        form.location = "Little Snoring"
        mock_client.post.return_value = None
        mock_client.get.return_value = sighting_payload

        service.submit(form)

        payload = mock_client.post.call_args.kwargs["json_data"]
        assert payload["location"] == "Little Snoring"
        assert (payload["lat"], payload["lng"]) == (51.5074, -0.1278)

    def test_post_failure_saves_locally(self, service, mock_client, mock_repository, form, store):
        mock_client.post.side_effect = requests.ConnectionError("down")

        result = service.submit(form)

        assert result.success is True
        assert result.message == LOCAL_SAVE_MESSAGE
        assert result.data.saved_remotely is False
        assert result.data.sighting.id.startswith("local-")
        assert result.data.sighting.id in store
        assert CACHE_PATH in mock_repository.files

    def test_http_error_saves_locally(self, service, mock_client, form):
        mock_client.post.side_effect = http_error(500)
        assert service.submit(form).data.saved_remotely is False

    def test_local_save_failure(self, service, mock_client, mock_repository, form):
        mock_client.post.side_effect = requests.ConnectionError("down")
        mock_repository.fail_writes = True

        result = service.submit(form)

        assert result.success is False
        assert "Could not save sighting locally" in result.error

    def test_med_severity_stored_as_medium(self, service, mock_client, form):
        form.severity = "Med"
        mock_client.post.side_effect = requests.ConnectionError("down")

        assert service.submit(form).data.sighting.severity == "Medium"
