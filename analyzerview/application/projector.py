# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Display metadata derived from records and grouped views.

Functions
---------
count_label : ``"<key> (<count>)"`` labels used by the group builders
engine_description : Static description of a known engine
tags_string : Comma-joined tags
severity_levels : Severity summary from ``violationCounts``
generic_columns : Columns for a generic table over arbitrary objects
violation_columns : Fixed columns for grouped violation tables
grouping_options : Selectable grouping modes
"""
from __future__ import annotations

import math
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from analyzerview.core.constants import (
    ENGINE_DESCRIPTIONS,
    SEVERITY_BUTTON_VARIANT,
    SEVERITY_PREFIX,
)
from analyzerview.core.models.views import (
    GROUPING_LABELS,
    ColumnDescriptor,
    GroupingMode,
    GroupingOption,
    SeverityLevel,
)


def count_label(key: Any, count: int) -> str:
    return f"{key} ({count})"


def engine_description(engine: Optional[str]) -> str:
    return ENGINE_DESCRIPTIONS.get(engine or "", "")


def tags_string(tags: Any) -> str:
    if not isinstance(tags, (list, tuple)):
        return ""
    return ", ".join(str(tag) for tag in tags)


def _level_sort_key(level: str) -> Tuple[int, float]:
    try:
        number = float(level)
    except ValueError:
        return 1, 0.0
    if math.isnan(number):
        return 1, 0.0
    return 0, number


def severity_levels(violation_counts: Optional[Mapping[str, Any]]) -> List[SeverityLevel]:
    """
    Build the severity summary from a ``violationCounts`` mapping.

    Only ``sev<N>`` keys are used. Levels sort ascending by their numeric
    value; levels that are not numbers keep their source order at the end.

    Examples
    --------
    >>> [s.label for s in severity_levels({"sev3": 1, "total": 3, "sev1": 2})]
    ['Severity 1: 2', 'Severity 3: 1']
    """
    if not violation_counts:
        return []

    levels = [
        SeverityLevel(
            level=key[len(SEVERITY_PREFIX):],
            count=count,
            label=f"Severity {key[len(SEVERITY_PREFIX):]}: {count}",
            button_class=f"severity-{key[len(SEVERITY_PREFIX):]}-btn",
            button_variant=SEVERITY_BUTTON_VARIANT,
        )
        for key, count in violation_counts.items()
        if isinstance(key, str) and key.startswith(SEVERITY_PREFIX)
    ]
    return sorted(levels, key=lambda level: _level_sort_key(level.level))


def _column_label(key: str) -> str:
    return key[:1].upper() + key[1:]


def generic_columns(items: Iterable[Any]) -> List[ColumnDescriptor]:
    """
    One text column per key found across ``items``, in first-seen order.
    Items that are not mappings contribute no columns.
    """
    seen: dict = {}
    for item in items:
        if isinstance(item, Mapping):
            for key in item:
                seen.setdefault(str(key), None)
    return [ColumnDescriptor(field_name=key, label=_column_label(key), type="text") for key in seen]


_DEFAULT_COLUMNS = (
    ("file", "File", "text"),
    ("line", "Line", "number"),
    ("message", "Message", "text"),
)

_TYPE_FILENAME_COLUMNS = (
    ("engine", "Engine", "text"),
    ("rule", "Rule", "text"),
    ("severity", "Severity", "text"),
    ("line", "Line", "number"),
    ("message", "Message", "text"),
)


def violation_columns(grouping: Optional[GroupingMode] = None) -> List[ColumnDescriptor]:
    """
    Columns of the violation table shown inside a group.

    Grouping by metadata type already shows the file in the tree, so that
    view lists engine, rule and severity instead.
    """
    layout = _TYPE_FILENAME_COLUMNS if grouping == GroupingMode.TYPE_FILENAME else _DEFAULT_COLUMNS
    return [ColumnDescriptor(field_name=name, label=label, type=kind) for name, label, kind in layout]


def grouping_options(modes: Sequence[GroupingMode]) -> List[GroupingOption]:
    return [GroupingOption(label=GROUPING_LABELS[mode], value=mode.value) for mode in modes]


__all__ = [
    "count_label",
    "engine_description",
    "tags_string",
    "severity_levels",
    "generic_columns",
    "violation_columns",
    "grouping_options",
]
