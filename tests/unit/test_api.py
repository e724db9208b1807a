"""
Unit tests for ticksight.core.http.client module.
"""

import pytest
import requests

from ticksight.core.http import APIClient


class TestAPIClient:
    """Tests for APIClient."""

    @pytest.fixture
    def client(self):
        return APIClient(base_url="https://sightings.test/", timeout=7)

    def test_url_for_joins_base(self, client):
        assert client.url_for("/sightings") == "https://sightings.test/sightings"

    def test_url_for_without_base(self):
        assert APIClient().url_for("/sightings") == "/sightings"

    def test_user_agent_header(self, client):
        assert client.session.headers["User-Agent"] == "ticksight/0.1"

    def test_no_retry_adapter_by_default(self, client):
        adapter = client.session.get_adapter("https://sightings.test/")
        assert adapter.max_retries.total == 0

    def test_retry_adapter_when_requested(self):
        client = APIClient(base_url="https://sightings.test", max_retries=2)
        adapter = client.session.get_adapter("https://sightings.test/")
        assert adapter.max_retries.total == 2

    def test_get_returns_json(self, client, mocker):
        response = mocker.Mock()
        response.json.return_value = [{"id": 1}]
        mock_get = mocker.patch.object(client.session, "get", return_value=response)

        assert client.get("/sightings") == [{"id": 1}]
        mock_get.assert_called_once_with(
            "https://sightings.test/sightings", params=None, timeout=7
        )

    def test_get_raises_on_http_error(self, client, mocker):
        response = mocker.Mock()
        response.raise_for_status.side_effect = requests.HTTPError("500")
        mocker.patch.object(client.session, "get", return_value=response)

        with pytest.raises(requests.HTTPError):
            client.get("/sightings")

    def test_post_sends_json(self, client, mocker):
        response = mocker.Mock(content=b'{"id": 9}')
        response.json.return_value = {"id": 9}
        mock_post = mocker.patch.object(client.session, "post", return_value=response)

        assert client.post("/sightings", json_data={"species": "Marsh tick"}) == {"id": 9}
        mock_post.assert_called_once_with(
            "https://sightings.test/sightings", json={"species": "Marsh tick"}, timeout=7
        )

    def test_post_empty_body(self, client, mocker):
        mocker.patch.object(client.session, "post", return_value=mocker.Mock(content=b""))
        assert client.post("/sightings", json_data={}) is None

    def test_post_non_json_body(self, client, mocker):
        response = mocker.Mock(content=b"created")
        response.json.side_effect = ValueError("not json")
        mocker.patch.object(client.session, "post", return_value=response)

        assert client.post("/sightings", json_data={}) is None

    def test_context_manager_closes_session(self, mocker):
        with APIClient() as client:
            mock_close = mocker.patch.object(client.session, "close")
        mock_close.assert_called_once()
