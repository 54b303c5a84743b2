# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Severity filter and free-text search over violation records.

Both filters are plain predicates over a single record. They compose by
logical AND and are applied before any grouping:

    visible = [r for r in records if matches_severity(r, sev) and matches_search(r, term)]

Search covers an explicit list of record fields. Lists are joined with
commas, locations render as ``file:line`` and other nested values as compact
JSON. ``fullViolation`` is not searched.

Functions
---------
matches_severity : Severity equality predicate
toggle_severity : Exclusive single-select toggle
normalize_search_term : Trim and lower-case user input
matches_search : Substring predicate over the searched fields
searchable_text : Stringified searched fields of a record
apply_filters : Compose both predicates over a record list
"""
from __future__ import annotations

from typing import Any, Iterable, List, Optional

from pydantic import BaseModel

from analyzerview.core.models.parsers._shared import as_str, severity_key
from analyzerview.core.models.records import Location, ViolationRecord

SEARCH_FIELDS = (
    "id",
    "rule",
    "engine",
    "severity",
    "file",
    "line",
    "message",
    "resource",
    "tags",
    "all_locations",
)


def _is_active(severity: Any) -> bool:
    return severity is not None and severity_key(severity) != ""


def matches_severity(record: ViolationRecord, severity: Any) -> bool:
    """True when no severity is selected or the record's severity equals it."""
    if not _is_active(severity):
        return True
    return severity_key(record.severity) == severity_key(severity)


def toggle_severity(current: Optional[str], clicked: Any) -> Optional[str]:
    """
    Select ``clicked``; selecting the active severity again clears the filter.
    """
    if not _is_active(clicked):
        return None
    clicked_key = severity_key(clicked)
    if _is_active(current) and severity_key(current) == clicked_key:
        return None
    return clicked_key


def normalize_search_term(raw: Optional[str]) -> str:
    return (raw or "").strip().lower()


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Location):
        return str(value)
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(item) for item in value)
    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=True, mode="json")
    return as_str(value) or ""


def searchable_text(record: ViolationRecord) -> List[str]:
    """Lower-cased text of every searched field, in field order."""
    return [_stringify(getattr(record, name)).lower() for name in SEARCH_FIELDS]


def matches_search(record: ViolationRecord, term: Optional[str]) -> bool:
    needle = normalize_search_term(term)
    if not needle:
        return True
    return any(needle in text for text in searchable_text(record))


def apply_filters(
    records: Iterable[ViolationRecord],
    severity: Any = None,
    term: Optional[str] = None,
) -> List[ViolationRecord]:
    return [
        record
        for record in records
        if matches_severity(record, severity) and matches_search(record, term)
    ]


__all__ = [
    "SEARCH_FIELDS",
    "matches_severity",
    "toggle_severity",
    "normalize_search_term",
    "matches_search",
    "searchable_text",
    "apply_filters",
]
