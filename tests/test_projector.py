"""Tests for display metadata."""

from analyzerview.application.projector import (
    count_label,
    engine_description,
    generic_columns,
    grouping_options,
    severity_levels,
    tags_string,
    violation_columns,
)
from analyzerview.core.models.views import GroupingMode


class TestSeverityLevels:
    def test_scenario(self):
        levels = severity_levels({"sev1": 2, "sev3": 1, "total": 3})
        assert [level.label for level in levels] == ["Severity 1: 2", "Severity 3: 1"]
        assert [level.button_class for level in levels] == ["severity-1-btn", "severity-3-btn"]
        assert all(level.button_variant == "brand" for level in levels)

    def test_numeric_order(self):
        levels = severity_levels({"sev10": 1, "sev2": 4})
        assert [level.level for level in levels] == ["2", "10"]

    def test_non_numeric_levels_sort_last(self):
        levels = severity_levels({"sevHigh": 1, "sev3": 2, "sevLow": 0, "sev1": 5})
        assert [level.level for level in levels] == ["1", "3", "High", "Low"]

    def test_non_severity_keys_are_ignored(self):
        assert severity_levels({"total": 3, "errors": 1}) == []

    def test_missing_counts(self):
        assert severity_levels(None) == []
        assert severity_levels({}) == []

    def test_wire_form(self):
        data = severity_levels({"sev2": 7})[0].to_dict()
        assert data == {
            "level": "2",
            "count": 7,
            "label": "Severity 2: 7",
            "buttonClass": "severity-2-btn",
            "buttonVariant": "brand",
        }


class TestColumns:
    def test_generic_columns_first_seen_union(self):
        columns = generic_columns([{"name": "a", "size": 1}, {"size": 2, "owner": "x"}, "skip"])
        assert [c.field_name for c in columns] == ["name", "size", "owner"]
        assert [c.label for c in columns] == ["Name", "Size", "Owner"]
        assert all(c.type == "text" for c in columns)

    def test_generic_columns_empty(self):
        assert generic_columns([]) == []

    def test_default_violation_columns(self):
        columns = violation_columns(GroupingMode.ENGINE)
        assert [(c.field_name, c.type) for c in columns] == [
            ("file", "text"),
            ("line", "number"),
            ("message", "text"),
        ]
        assert violation_columns() == columns

    def test_type_filename_columns(self):
        columns = violation_columns(GroupingMode.TYPE_FILENAME)
        assert [c.field_name for c in columns] == ["engine", "rule", "severity", "line", "message"]

    def test_column_wire_form(self):
        assert violation_columns()[1].to_dict() == {"fieldName": "line", "label": "Line", "type": "number"}


class TestLabels:
    def test_count_label(self):
        assert count_label("pmd", 3) == "pmd (3)"
        assert count_label(None, 2) == "None (2)"

    def test_engine_description(self):
        assert engine_description("eslint").startswith("Analyzes JavaScript")
        assert engine_description("unknown") == ""
        assert engine_description(None) == ""

    def test_tags_string(self):
        assert tags_string(["Security", "Apex"]) == "Security, Apex"
        assert tags_string([]) == ""
        assert tags_string(None) == ""
        assert tags_string("Security") == ""

    def test_grouping_options(self):
        options = grouping_options((GroupingMode.ENGINE, GroupingMode.TYPE_FILENAME))
        assert [o.to_dict() for o in options] == [
            {"label": "Engine/Rule", "value": "engine"},
            {"label": "Type/Filename", "value": "typefilename"},
        ]
