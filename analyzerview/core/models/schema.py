# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Pydantic schema models for reports and views.

This module re-exports every public model so callers have one import location.

Examples
--------
>>> from analyzerview.core.models.schema import normalize, GroupingMode
>>> report = normalize('{"violations": [{"engine": "pmd", "rule": "R1"}]}')
>>> report.records[0].engine
'pmd'

See Also
--------
analyzerview.core.models.records : Record models
analyzerview.core.models.views : View models
"""
from __future__ import annotations

from .parsers.report import RawViolation, normalize, to_records
from .records import Location, Severity, ViolationRecord
from .views import (
    GROUPED_VIEW_MODES,
    GROUPING_LABELS,
    ColumnDescriptor,
    EngineGroup,
    FileGroup,
    FlatDumpView,
    GroupedView,
    GroupingMode,
    GroupingOption,
    MetaTypeGroup,
    NormalizedReport,
    RawView,
    ReportMode,
    RuleGroup,
    SeverityLevel,
    TabularView,
    ViewFeatures,
    ViewOutput,
)


__all__ = [
    "Location",
    "Severity",
    "ViolationRecord",
    "RawViolation",
    "normalize",
    "to_records",
    "ReportMode",
    "GroupingMode",
    "GROUPING_LABELS",
    "GROUPED_VIEW_MODES",
    "NormalizedReport",
    "RuleGroup",
    "EngineGroup",
    "FileGroup",
    "MetaTypeGroup",
    "ColumnDescriptor",
    "SeverityLevel",
    "GroupingOption",
    "ViewFeatures",
    "TabularView",
    "GroupedView",
    "FlatDumpView",
    "RawView",
    "ViewOutput",
]
