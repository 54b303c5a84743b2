# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Pydantic models for grouped views and display descriptors.

Every structure handed to the presentation layer is defined here. They are
frozen and rebuilt from scratch whenever the records, the severity filter, the
search term or the grouping mode change.

Classes
-------
ReportMode : Display mode chosen by the normalizer
GroupingMode : Hierarchical view strategy
NormalizedReport : Normalizer result
RuleGroup, EngineGroup : Engine/Rule tree
FileGroup, MetaTypeGroup : MetadataType/File tree (FileGroup also for Filename)
ColumnDescriptor, SeverityLevel, GroupingOption : Display metadata
ViewFeatures : Which optional view features are active
TabularView, GroupedView, FlatDumpView, RawView : Output contracts

See Also
--------
analyzerview.application.view_state : Produces the output contracts
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from .records import Severity, ViolationRecord


class ReportMode(str, Enum):
    TABULAR = "Tabular"
    FLAT_DUMP = "FlatDump"
    RAW = "Raw"


class GroupingMode(str, Enum):
    ENGINE = "engine"
    TYPE_FILENAME = "typefilename"
    FILENAME = "filename"
    RULE = "rule"


GROUPING_LABELS: Dict[GroupingMode, str] = {
    GroupingMode.ENGINE: "Engine/Rule",
    GroupingMode.TYPE_FILENAME: "Type/Filename",
    GroupingMode.FILENAME: "Filename",
    GroupingMode.RULE: "Rule",
}

GROUPED_VIEW_MODES: Dict[GroupingMode, str] = {
    GroupingMode.ENGINE: "GroupedByEngine",
    GroupingMode.TYPE_FILENAME: "GroupedByMetadataType",
    GroupingMode.FILENAME: "GroupedByFilename",
    GroupingMode.RULE: "GroupedByRule",
}


class _ViewModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class NormalizedReport(_ViewModel):
    """
    Result of normalizing report text.

    Tabular: ``records`` holds one record per violation.
    FlatDump: ``payload`` holds the parsed JSON, untouched.
    Raw: ``text`` holds the original text.
    """

    mode: ReportMode
    records: List[ViolationRecord] = []
    payload: Any = None
    text: Optional[str] = None
    violation_counts: Optional[Dict[str, Any]] = Field(None, alias="violationCounts")


class RuleGroup(_ViewModel):
    key: Optional[str] = None
    label: str
    engine: Optional[str] = None
    severity: Optional[Severity] = None
    tags_string: str = Field("", alias="tagsString")
    resource: str = ""
    violations: List[ViolationRecord] = []


class EngineGroup(_ViewModel):
    key: Optional[str] = None
    label: str
    description: str = ""
    violation_count: int = Field(0, alias="violationCount")
    rules: List[RuleGroup] = []


class FileGroup(_ViewModel):
    key: str
    label: str
    violations: List[ViolationRecord] = []


class MetaTypeGroup(_ViewModel):
    key: str
    label: str
    files: List[FileGroup] = []

    @property
    def violation_count(self) -> int:
        return sum(len(f.violations) for f in self.files)


class ColumnDescriptor(_ViewModel):
    field_name: str = Field(alias="fieldName")
    label: str
    type: str = "text"


class SeverityLevel(_ViewModel):
    level: str
    count: Any = None
    label: str
    button_class: str = Field(alias="buttonClass")
    button_variant: str = Field(alias="buttonVariant")


class GroupingOption(_ViewModel):
    label: str
    value: str


class ViewFeatures(_ViewModel):
    """Optional features of a view. Disabled features ignore state changes."""

    search: bool = True
    severity_filter: bool = Field(True, alias="severityFilter")
    grouping_modes: Tuple[GroupingMode, ...] = Field(
        (GroupingMode.ENGINE, GroupingMode.TYPE_FILENAME), alias="groupingModes"
    )


Tree = Union[List[EngineGroup], List[MetaTypeGroup], List[FileGroup], List[RuleGroup]]


class TabularView(_ViewModel):
    mode: Literal["Tabular"] = "Tabular"
    columns: List[ColumnDescriptor] = []
    rows: List[ViolationRecord] = []
    record_count: int = Field(0, alias="recordCount")
    visible_count: int = Field(0, alias="visibleCount")
    severity_levels: List[SeverityLevel] = Field([], alias="severityLevels")
    message: Optional[str] = None


class GroupedView(_ViewModel):
    mode: Literal[
        "GroupedByEngine", "GroupedByMetadataType", "GroupedByFilename", "GroupedByRule"
    ]
    tree: Tree = []
    columns: List[ColumnDescriptor] = []
    record_count: int = Field(0, alias="recordCount")
    visible_count: int = Field(0, alias="visibleCount")
    severity_levels: List[SeverityLevel] = Field([], alias="severityLevels")
    grouping_options: List[GroupingOption] = Field([], alias="groupingOptions")
    message: Optional[str] = None


class FlatDumpView(_ViewModel):
    mode: Literal["FlatDump"] = "FlatDump"
    payload: Any = None
    columns: List[ColumnDescriptor] = []


class RawView(_ViewModel):
    mode: Literal["Raw"] = "Raw"
    text: str = ""


ViewOutput = Union[TabularView, GroupedView, FlatDumpView, RawView]


__all__ = [
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
