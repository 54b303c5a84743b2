"""Tests for the severity filter and the free-text search."""

import pytest

from analyzerview.application.filters import (
    apply_filters,
    matches_search,
    matches_severity,
    normalize_search_term,
    searchable_text,
    toggle_severity,
)
from analyzerview.core.models.parsers import to_records


class TestSeverityFilter:
    def test_inactive_filter_keeps_everything(self, records):
        assert all(matches_severity(r, None) for r in records)
        assert all(matches_severity(r, "") for r in records)

    def test_numeric_and_string_severities_match(self, records):
        # records[0] has severity 2, records[3] has severity "2"
        assert matches_severity(records[0], "2")
        assert matches_severity(records[3], 2)
        assert not matches_severity(records[1], "2")

    def test_integral_float_matches(self):
        record = to_records({"violations": [{"rule": "R", "severity": 3.0}]})[0]
        assert matches_severity(record, "3")

    def test_missing_severity_only_matches_inactive_filter(self):
        record = to_records({"violations": [{"rule": "R"}]})[0]
        assert matches_severity(record, None)
        assert not matches_severity(record, "1")


class TestToggleSeverity:
    def test_select(self):
        assert toggle_severity(None, "2") == "2"

    def test_toggle_is_involutive(self):
        assert toggle_severity(toggle_severity(None, "3"), "3") is None

    def test_numeric_click_clears_string_selection(self):
        assert toggle_severity("3", 3) is None

    def test_selecting_another_replaces(self):
        assert toggle_severity("1", "4") == "4"

    def test_empty_click_clears(self):
        assert toggle_severity("1", None) is None


class TestSearch:
    def test_normalize_search_term(self):
        assert normalize_search_term("  CRUD  ") == "crud"
        assert normalize_search_term(None) == ""

    def test_empty_term_is_identity(self, records):
        assert apply_filters(records, term="   ") == list(records)

    def test_case_insensitive_message_match(self, records):
        hits = apply_filters(records, term="VALIDATE CRUD")
        assert [r.rule for r in hits] == ["ApexCRUDViolation", "ApexCRUDViolation"]

    def test_matches_tags(self, records):
        hits = apply_filters(records, term="documentation")
        assert [r.rule for r in hits] == ["ApexDoc"]

    def test_matches_secondary_location(self, records):
        hits = apply_filters(records, term="accountcontroller.cls:20")
        assert [r.engine for r in hits] == ["sfge"]

    def test_matches_line_number(self, records):
        assert matches_search(records[2], "40")

    def test_full_violation_is_not_searched(self, records):
        # "startColumn" only appears in the raw location of the first violation
        assert apply_filters(records, term="startcolumn") == []

    def test_no_match(self, records):
        assert apply_filters(records, term="no-such-thing") == []

    def test_every_substring_of_a_searched_field_matches(self, records):
        for record in records:
            for text in searchable_text(record):
                for start in range(len(text)):
                    for end in range(start + 1, min(len(text), start + 12) + 1):
                        assert matches_search(record, text[start:end]), (record.id, text[start:end])


class TestComposition:
    @pytest.mark.parametrize(
        "severity, term, expected",
        [
            (None, None, 5),
            ("3", None, 2),
            (None, "accountservice", 3),
            ("3", "accountservice", 2),
            ("1", "accountservice", 0),
        ],
    )
    def test_filters_compose_by_and(self, records, severity, term, expected):
        assert len(apply_filters(records, severity, term)) == expected

    def test_source_order_is_preserved(self, records):
        hits = apply_filters(records, term="apex")
        positions = [records.index(r) for r in hits]
        assert positions == sorted(positions)
