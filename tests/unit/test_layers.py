"""
Unit tests for ticksight.views.layers module.
"""

from ticksight.core.constants import SEVERITY_COLORS
from ticksight.models.sighting import Sighting
from ticksight.views.layers import MarkerLayer, ResultsList


class TestMarkerLayer:
    """Tests for MarkerLayer."""

    def test_skips_records_without_coordinates(self, sample_sightings, now):
        layer = MarkerLayer()
        layer.render(sample_sightings, now=now)

        assert layer.ids == ["1", "2", "3", "4", "5"]

    def test_zero_coordinates_are_mapped(self, now):
        layer = MarkerLayer()
        layer.render([Sighting(id="eq", date="2024-11-19", lat=0.0, lng=0.0)], now=now)
        assert layer.ids == ["eq"]

    def test_marker_colour_follows_severity(self, sample_sightings, now):
        layer = MarkerLayer()
        layer.render(sample_sightings, now=now)

        assert layer.find("1").color == SEVERITY_COLORS["Recent"]
        assert layer.find("3").color == SEVERITY_COLORS["Medium"]
        assert layer.find("5").color == SEVERITY_COLORS["Older"]

    def test_med_alias_uses_medium_colour(self, now):
        layer = MarkerLayer()
        layer.render([Sighting(id="m", date="2024-01-01", severity="Med", lat=1.0, lng=1.0)], now=now)
        assert layer.find("m").color == SEVERITY_COLORS["Medium"]

    def test_highlight_enlarges_marker(self, sample_sightings, now):
        layer = MarkerLayer()
        layer.render(sample_sightings, now=now)
        layer.highlight("2")

        assert (layer.find("2").radius, layer.find("2").weight) == (12, 3)
        assert (layer.find("1").radius, layer.find("1").weight) == (8, 2)

    def test_highlight_survives_rerender(self, sample_sightings, now):
        layer = MarkerLayer()
        layer.render(sample_sightings, now=now)
        layer.highlight("2")
        layer.render(sample_sightings, now=now)

        assert layer.find("2").radius == 12


class TestResultsList:
    """Tests for ResultsList."""

    def test_includes_records_without_coordinates(self, sample_sightings, now):
        results = ResultsList()
        results.render(sample_sightings, now=now)

        assert results.ids == ["1", "2", "3", "4", "5", "6"]

    def test_card_fields(self, sample_sightings, now):
        results = ResultsList()
        results.render(sample_sightings[:1], now=now)
        card = results.cards[0]

        assert card.date == "10/11/2024"
        assert card.severity == "Recent"
        assert card.species == "Marsh tick"

    def test_empty(self, now):
        results = ResultsList()
        results.render([], now=now)

        assert results.is_empty
        assert results.empty_message == "No results found"

    def test_highlight_marks_single_card(self, sample_sightings, now):
        results = ResultsList()
        results.render(sample_sightings, now=now)
        results.highlight("6")

        assert [c.sighting_id for c in results.cards if c.active] == ["6"]
