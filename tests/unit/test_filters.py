"""
Unit tests for ticksight.core.filters module.
"""

from ticksight.core.filters import FilterCriteria, apply_filters, matches
from ticksight.models.sighting import Sighting


class TestFilterCriteria:
    """Tests for FilterCriteria."""

    def test_empty_strings_are_absent(self):
        criteria = FilterCriteria(date_prefix="", species="", severity="")
        assert criteria.is_empty
        assert criteria.species is None

    def test_severity_alias_normalized(self):
        assert FilterCriteria(severity="Med").severity == "Medium"


class TestApplyFilters:
    """Tests for apply_filters function."""

    def test_no_criteria_returns_copy(self, sample_sightings, now):
        result = apply_filters(sample_sightings, None, now=now)

        assert result == sample_sightings
        assert result is not sample_sightings

    def test_date_prefix(self, sample_sightings, now):
        result = apply_filters(sample_sightings, FilterCriteria(date_prefix="2024-11"), now=now)
        assert [s.id for s in result] == ["1", "6"]

    def test_year_prefix(self, sample_sightings, now):
        result = apply_filters(sample_sightings, FilterCriteria(date_prefix="2024"), now=now)
        assert [s.id for s in result] == ["1", "2", "3", "6"]

    def test_species_exact_match(self, sample_sightings, now):
        result = apply_filters(sample_sightings, FilterCriteria(species="Marsh tick"), now=now)
        assert [s.id for s in result] == ["1", "4", "6"]

    def test_species_is_case_sensitive(self, sample_sightings, now):
        assert apply_filters(sample_sightings, FilterCriteria(species="marsh tick"), now=now) == []

    def test_severity_uses_derived_value(self, sample_sightings, now):
        result = apply_filters(sample_sightings, FilterCriteria(severity="Recent"), now=now)
        assert [s.id for s in result] == ["1", "6"]

    def test_criteria_are_conjunctive(self, sample_sightings, now):
        criteria = FilterCriteria(date_prefix="2024", species="Marsh tick", severity="Recent")
        result = apply_filters(sample_sightings, criteria, now=now)
        assert [s.id for s in result] == ["1", "6"]

    def test_preserves_order(self, sample_sightings, now):
        shuffled = list(reversed(sample_sightings))
        result = apply_filters(shuffled, FilterCriteria(species="Marsh tick"), now=now)
        assert [s.id for s in result] == ["6", "4", "1"]

    def test_med_and_medium_are_equivalent(self, now):
        records = [
            Sighting(id="a", date="2024-01-01", severity="Med"),
            Sighting(id="b", date="2024-01-01", severity="Medium"),
            Sighting(id="c", date="2024-01-01", severity="High"),
        ]

        by_alias = apply_filters(records, FilterCriteria(severity="Med"), now=now)
        by_name = apply_filters(records, FilterCriteria(severity="Medium"), now=now)

        assert [s.id for s in by_alias] == ["a", "b"]
        assert by_alias == by_name

    def test_no_matches(self, sample_sightings, now):
        assert apply_filters(sample_sightings, FilterCriteria(date_prefix="1999"), now=now) == []


class TestMatches:
    """Tests for matches function."""

    def test_stored_severity_overrides_date(self, now):
        sighting = Sighting(id="1", date="2024-11-19", severity="Low")
        assert matches(sighting, FilterCriteria(severity="Low"), now=now)
        assert not matches(sighting, FilterCriteria(severity="Recent"), now=now)
