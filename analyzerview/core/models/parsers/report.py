# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Parser for multi-engine code analysis reports.

The report is a JSON document with a ``violations`` array produced by several
analysis engines (PMD, ESLint, CPD, the Graph Engine, ...) and an optional
``violationCounts`` summary. This parser turns the decoded text into canonical
ViolationRecords and decides how the report should be displayed.

Display modes
-------------
Tabular
    ``violations`` is a non-empty array; one record per entry, source order.
FlatDump
    Valid JSON that is not a violation report, or one with no violations.
    The parsed document is passed through for a generic structured dump.
Raw
    The text is not JSON. It is passed through unchanged.

Functions
---------
normalize : Parse report text into a NormalizedReport
to_records : Transform a parsed report document into records

Examples
--------
>>> report = normalize('{"violations": [{"engine": "pmd", "rule": "R1"}]}')
>>> report.mode.value, len(report.records)
('Tabular', 1)
>>> normalize("not json").mode.value
'Raw'

See Also
--------
analyzerview.application.view_state : Builds views on top of the records
"""
from __future__ import annotations

import copy
import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from analyzerview.core.logging_config import get_logger
from ..records import Location, Severity, ViolationRecord
from ..views import NormalizedReport, ReportMode
from ._shared import as_int, as_str, first_item

logger = get_logger(__name__)


def _clean_location(raw: Any) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        return {}
    return {"file": as_str(raw.get("file")), "startLine": as_int(raw.get("startLine"))}


class RawViolation(BaseModel):
    """
    One entry of the ``violations`` array.

    Validation never rejects an entry: wrong-typed scalars are converted to
    text and wrong-typed lists are treated as absent.
    """

    engine: Optional[str] = None
    rule: Optional[str] = None
    severity: Optional[Severity] = None
    message: Optional[str] = None
    tags: Optional[List[str]] = None
    resources: Optional[List[str]] = None
    locations: Optional[List[Location]] = None
    primary_location_index: Optional[int] = Field(None, alias="primaryLocationIndex")
    sink_file_name: Optional[str] = Field(None, alias="sinkFileName")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("engine", "rule", "message", "sink_file_name", mode="before")
    @classmethod
    def _text(cls, value: Any) -> Optional[str]:
        return as_str(value)

    @field_validator("severity", mode="before")
    @classmethod
    def _severity(cls, value: Any) -> Any:
        if value is None or (isinstance(value, (int, float, str)) and not isinstance(value, bool)):
            return value
        return as_str(value)

    @field_validator("tags", "resources", mode="before")
    @classmethod
    def _text_list(cls, value: Any) -> Optional[List[str]]:
        if not isinstance(value, list):
            return None
        return [text for text in (as_str(item) for item in value) if text is not None]

    @field_validator("locations", mode="before")
    @classmethod
    def _locations(cls, value: Any) -> Optional[List[Dict[str, Any]]]:
        if not isinstance(value, list):
            return None
        return [_clean_location(item) for item in value]

    @field_validator("primary_location_index", mode="before")
    @classmethod
    def _index(cls, value: Any) -> Optional[int]:
        return as_int(value)

    @classmethod
    def from_raw(cls, raw: Any) -> "RawViolation":
        if not isinstance(raw, dict):
            return cls()
        return cls.model_validate(raw)

    def primary_location(self) -> Location:
        """
        ``locations[primaryLocationIndex]`` when that index exists, else the
        first location, else an empty location.
        """
        locations = self.locations or []
        index = self.primary_location_index
        if index is not None and 0 <= index < len(locations):
            return locations[index]
        return first_item(locations, Location())


def _record_id(rule: Optional[str], location: Location, index: int) -> str:
    parts = [rule, location.file, location.start_line, index]
    return "-".join("" if part is None else str(part) for part in parts)


def _to_record(raw: Any, index: int, copy_raw: bool = True) -> ViolationRecord:
    violation = RawViolation.from_raw(raw)
    primary = violation.primary_location()
    return ViolationRecord(
        id=_record_id(violation.rule, primary, index),
        rule=violation.rule,
        engine=violation.engine,
        severity=violation.severity,
        file=primary.file,
        line=primary.start_line,
        message=violation.message,
        resource=first_item(violation.resources, "") or "",
        tags=violation.tags,
        all_locations=violation.locations,
        full_violation=copy.deepcopy(raw) if copy_raw else raw,
    )


def to_records(parsed: Any, *, copy_raw: bool = True) -> List[ViolationRecord]:
    """
    Transform a parsed report into records, in source order.
    Returns an empty list when the document carries no ``violations`` array.

    Each record keeps a deep copy of its source entry in ``full_violation``.
    Pass ``copy_raw=False`` when the caller owns ``parsed`` and hands it over.
    """
    if not isinstance(parsed, dict):
        return []
    violations = parsed.get("violations")
    if not isinstance(violations, list):
        return []
    return [_to_record(raw, index, copy_raw) for index, raw in enumerate(violations)]


def _violation_counts(parsed: Any) -> Optional[Dict[str, Any]]:
    if not isinstance(parsed, dict):
        return None
    counts = parsed.get("violationCounts")
    if not isinstance(counts, dict):
        return None
    out: Dict[str, Any] = {}
    for key, value in counts.items():
        number = as_int(value)
        out[str(key)] = number if number is not None else value
    return out


def normalize(raw_text: str) -> NormalizedReport:
    """
    Parse decoded report text and choose its display mode.

    Parameters
    ----------
    raw_text : str
        Report content, already decoded to text.

    Returns
    -------
    NormalizedReport
        Tabular with records, FlatDump with the parsed payload, or Raw with
        the original text when the content is not JSON.
    """
    try:
        parsed = json.loads(raw_text)
    except (TypeError, ValueError, RecursionError) as exc:
        logger.debug("Report is not JSON, showing raw text: %s", exc)
        return NormalizedReport(mode=ReportMode.RAW, text=raw_text if isinstance(raw_text, str) else "")

    counts = _violation_counts(parsed)
    # parsed is private to this call
    records = to_records(parsed, copy_raw=False)
    if records:
        logger.debug("Normalized %d violations", len(records))
        return NormalizedReport(mode=ReportMode.TABULAR, records=records, violation_counts=counts)

    logger.debug("Report has no violations, using flat dump")
    return NormalizedReport(mode=ReportMode.FLAT_DUMP, payload=parsed, violation_counts=counts)


__all__ = ["RawViolation", "normalize", "to_records"]
