# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Immutable view state and view rendering.

The caller holds a ViewState and replaces it with the value returned by
``select_severity``, ``set_search`` or ``set_grouping``. ``render_view`` is a
pure function of the state and the active features; every call rebuilds the
whole view from the normalized report.

Examples
--------
>>> from analyzerview.core.models.parsers import normalize
>>> features = ViewFeatures()
>>> state = initial_state(normalize(report_text), features)
>>> state = select_severity(state, "2", features)
>>> view = render_view(state, features)
>>> view.mode
'GroupedByEngine'

See Also
--------
analyzerview.application.grouping : Group builders
analyzerview.application.filters : Severity and search filters
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from analyzerview.core.constants import NO_VIOLATIONS_MESSAGE
from analyzerview.core.exceptions import ValidationError
from analyzerview.core.logging_config import get_logger
from analyzerview.core.models.records import ViolationRecord
from analyzerview.core.models.views import (
    GROUPED_VIEW_MODES,
    FlatDumpView,
    GroupedView,
    GroupingMode,
    NormalizedReport,
    RawView,
    ReportMode,
    TabularView,
    ViewFeatures,
    ViewOutput,
)

from .filters import (
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

logger = get_logger(__name__)

_BUILDERS: Dict[GroupingMode, Callable[..., list]] = {
    GroupingMode.ENGINE: group_by_engine_rule,
    GroupingMode.TYPE_FILENAME: group_by_metadata_type_file,
    GroupingMode.FILENAME: group_by_filename,
    GroupingMode.RULE: group_by_rule,
}


class ViewState(BaseModel):
    """
    What the user is currently looking at.

    ``grouping`` of None shows the plain violation table.
    """

    report: NormalizedReport
    grouping: Optional[GroupingMode] = GroupingMode.ENGINE
    selected_severity: Optional[str] = None
    search_term: str = ""

    model_config = ConfigDict(frozen=True)


def _check_grouping(grouping: Optional[GroupingMode], features: ViewFeatures) -> Optional[GroupingMode]:
    if grouping is None:
        return None
    try:
        mode = GroupingMode(grouping)
    except ValueError:
        raise ValidationError("grouping", f"Unknown grouping mode: {grouping!r}")
    if mode not in features.grouping_modes:
        enabled = ", ".join(m.value for m in features.grouping_modes) or "none"
        raise ValidationError(
            "grouping",
            f"Grouping mode '{mode.value}' is not enabled (enabled: {enabled})",
        )
    return mode


def initial_state(
    report: NormalizedReport,
    features: ViewFeatures,
    grouping: Optional[GroupingMode] = GroupingMode.ENGINE,
) -> ViewState:
    """
    Fresh state for a newly loaded report. Falls back to the first enabled
    grouping (or the plain table) when ``grouping`` is not enabled.
    """
    if grouping is not None and grouping not in features.grouping_modes:
        grouping = features.grouping_modes[0] if features.grouping_modes else None
    return ViewState(report=report, grouping=grouping)


def select_severity(state: ViewState, severity: Any, features: ViewFeatures) -> ViewState:
    if not features.severity_filter:
        return state
    selected = toggle_severity(state.selected_severity, severity)
    logger.debug("Severity filter: %s", selected or "none")
    return state.model_copy(update={"selected_severity": selected})


def set_search(state: ViewState, raw_term: Optional[str], features: ViewFeatures) -> ViewState:
    if not features.search:
        return state
    return state.model_copy(update={"search_term": normalize_search_term(raw_term)})


def set_grouping(state: ViewState, grouping: Optional[GroupingMode], features: ViewFeatures) -> ViewState:
    return state.model_copy(update={"grouping": _check_grouping(grouping, features)})


def _active_severity(state: ViewState, features: ViewFeatures) -> Optional[str]:
    return state.selected_severity if features.severity_filter else None


def _searched(state: ViewState, features: ViewFeatures) -> List[ViolationRecord]:
    if not features.search or not state.search_term:
        return list(state.report.records)
    return [r for r in state.report.records if matches_search(r, state.search_term)]


def visible_records(state: ViewState, features: ViewFeatures) -> List[ViolationRecord]:
    """Records passing both the severity filter and the search, in source order."""
    severity = _active_severity(state, features)
    return [r for r in _searched(state, features) if matches_severity(r, severity)]


def render_view(state: ViewState, features: ViewFeatures) -> ViewOutput:
    """Build the output for the presentation layer from the current state."""
    report = state.report

    if report.mode == ReportMode.RAW:
        return RawView(text=report.text or "")

    if report.mode == ReportMode.FLAT_DUMP:
        payload = report.payload
        columns = generic_columns(payload) if isinstance(payload, list) else []
        return FlatDumpView(payload=payload, columns=columns)

    levels = severity_levels(report.violation_counts)
    record_count = len(report.records)

    if state.grouping is None:
        rows = visible_records(state, features)
        return TabularView(
            columns=generic_columns(r.to_dict() for r in report.records),
            rows=rows,
            record_count=record_count,
            visible_count=len(rows),
            severity_levels=levels,
            message=None if rows else NO_VIOLATIONS_MESSAGE,
        )

    # builders apply the severity filter themselves
    searched = _searched(state, features)
    severity = _active_severity(state, features)
    tree = _BUILDERS[state.grouping](searched, severity)
    visible_count = len(visible_records(state, features))

    return GroupedView(
        mode=GROUPED_VIEW_MODES[state.grouping],
        tree=tree,
        columns=violation_columns(state.grouping),
        record_count=record_count,
        visible_count=visible_count,
        severity_levels=levels,
        grouping_options=grouping_options(features.grouping_modes),
        message=None if visible_count else NO_VIOLATIONS_MESSAGE,
    )


__all__ = [
    "ViewState",
    "initial_state",
    "select_severity",
    "set_search",
    "set_grouping",
    "visible_records",
    "render_view",
]
