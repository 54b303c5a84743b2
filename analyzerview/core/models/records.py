# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Canonical violation records.

A ViolationRecord is the flat, display-oriented form of one violation taken
from an analysis report. Records are frozen pydantic models; the wire form
(``to_dict``) uses the camelCase names expected by the presentation layer.

Classes
-------
Location : A single source location of a violation
ViolationRecord : Canonical flat record for one violation

Examples
--------
>>> loc = Location(file="main/default/classes/Foo.cls", startLine=5)
>>> loc.start_line
5

See Also
--------
analyzerview.core.models.parsers.report : Builds records from report text
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Severity = Union[int, float, str]


class Location(BaseModel):
    """Where a violation occurs. Fields other than file/startLine are ignored."""

    file: Optional[str] = None
    start_line: Optional[int] = Field(None, alias="startLine")

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    def __str__(self) -> str:
        if self.start_line is None:
            return self.file or ""
        return f"{self.file or ''}:{self.start_line}"


class ViolationRecord(BaseModel):
    """
    One violation, flattened for display.

    ``file`` and ``line`` describe the primary location; every location of the
    violation is kept in ``all_locations``. Only the first entry of the source
    ``resources`` list is retained in ``resource``. ``full_violation`` is a
    private copy of the source entry used for detail views.
    """

    id: str
    rule: Optional[str] = None
    engine: Optional[str] = None
    severity: Optional[Severity] = None
    file: Optional[str] = None
    line: Optional[int] = None
    message: Optional[str] = None
    resource: str = ""
    tags: Optional[List[str]] = None
    all_locations: Optional[List[Location]] = Field(None, alias="allLocations")
    full_violation: Any = Field(None, alias="fullViolation")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @property
    def sink_file_name(self) -> Optional[str]:
        """``sinkFileName`` of the source entry (data-flow engines only)."""
        if isinstance(self.full_violation, dict):
            value = self.full_violation.get("sinkFileName")
            return value if isinstance(value, str) and value else None
        return None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


__all__ = ["Location", "Severity", "ViolationRecord"]
