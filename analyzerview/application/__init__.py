# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Application layer: filtering, grouping, projection and view state.

Modules
-------
filters : Severity filter and substring search
grouping : Group builders
projector : Labels, counts and column descriptors
view_state : Immutable view state and ``render_view``
file : Reading and decoding report files

Examples
--------
>>> from analyzerview.application import initial_state, render_view
>>> from analyzerview.core.models.parsers import normalize
>>> from analyzerview.core.models.views import ViewFeatures
>>> features = ViewFeatures()
>>> view = render_view(initial_state(normalize("not json"), features), features)
>>> view.mode
'Raw'
"""
from __future__ import annotations

from .file import decode_report, read_report
from .filters import (
    apply_filters,
    matches_search,
    matches_severity,
    normalize_search_term,
    toggle_severity,
)
from .grouping import (
    group_by_engine_rule,
    group_by_filename,
    group_by_metadata_type_file,
    group_by_rule,
)
from .projector import (
    generic_columns,
    grouping_options,
    severity_levels,
    violation_columns,
)
from .view_state import (
    ViewState,
    initial_state,
    render_view,
    select_severity,
    set_grouping,
    set_search,
    visible_records,
)

__all__ = [
    "decode_report",
    "read_report",
    "apply_filters",
    "matches_search",
    "matches_severity",
    "normalize_search_term",
    "toggle_severity",
    "group_by_engine_rule",
    "group_by_filename",
    "group_by_metadata_type_file",
    "group_by_rule",
    "generic_columns",
    "grouping_options",
    "severity_levels",
    "violation_columns",
    "ViewState",
    "initial_state",
    "render_view",
    "select_severity",
    "set_grouping",
    "set_search",
    "visible_records",
]
