# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Group builders for violation records.

Each builder makes a single pass over the records, skipping those that fail
the severity filter, and accumulates buckets in first-seen order. Engines,
rules, metadata types and files are therefore emitted in the order they first
appear, never sorted.

Builders never raise on malformed records. A record without an engine or rule
is grouped under a ``None`` key; a record without a file is grouped under
``UNKNOWN_FILE``.

A rule bucket takes its severity, tags and resource from the first record seen
for that rule. Later records of the same rule keep their own values, but the
bucket does not reflect them.

Functions
---------
group_by_engine_rule : Engine -> Rule tree
group_by_metadata_type_file : Metadata type -> File tree
group_by_filename : Flat grouping by file name
group_by_rule : Flat grouping by rule
metadata_type_and_file : Split a path into (metadata type, file key)
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple

from analyzerview.core.constants import MAIN_DEFAULT_PATTERN, UNKNOWN_FILE, UNKNOWN_TYPE
from analyzerview.core.logging_config import get_logger
from analyzerview.core.models.records import ViolationRecord
from analyzerview.core.models.views import EngineGroup, FileGroup, MetaTypeGroup, RuleGroup

from .filters import matches_severity
from .projector import count_label, engine_description, tags_string

logger = get_logger(__name__)


class _RuleBucket:
    __slots__ = ("rule", "engine", "severity", "tags", "resource", "violations")

    def __init__(self, first: ViolationRecord):
        self.rule = first.rule
        self.engine = first.engine
        self.severity = first.severity
        self.tags = first.tags
        self.resource = first.resource
        self.violations: List[ViolationRecord] = []

    def to_group(self) -> RuleGroup:
        return RuleGroup(
            key=self.rule,
            label=count_label(self.rule, len(self.violations)),
            engine=self.engine,
            severity=self.severity,
            tags_string=tags_string(self.tags),
            resource=self.resource,
            violations=list(self.violations),
        )


def _accumulate_rules(
    buckets: Dict[Optional[str], _RuleBucket], record: ViolationRecord
) -> None:
    bucket = buckets.get(record.rule)
    if bucket is None:
        bucket = buckets[record.rule] = _RuleBucket(record)
    bucket.violations.append(record)


def group_by_engine_rule(
    records: Iterable[ViolationRecord], severity: Any = None
) -> List[EngineGroup]:
    engines: Dict[Optional[str], Dict[Optional[str], _RuleBucket]] = {}
    counts: Dict[Optional[str], int] = {}

    for record in records:
        if not matches_severity(record, severity):
            continue
        rules = engines.setdefault(record.engine, {})
        _accumulate_rules(rules, record)
        counts[record.engine] = counts.get(record.engine, 0) + 1

    groups = [
        EngineGroup(
            key=engine,
            label=count_label(engine, counts[engine]),
            description=engine_description(engine),
            violation_count=counts[engine],
            rules=[bucket.to_group() for bucket in rules.values()],
        )
        for engine, rules in engines.items()
    ]
    logger.debug("Grouped %d violations into %d engines", sum(counts.values()), len(groups))
    return groups


def metadata_type_and_file(file: Optional[str]) -> Tuple[str, str]:
    """
    ``.../main/default/classes/Foo.cls`` -> ``("classes", "Foo.cls")``.
    Paths outside ``main/default`` map to ``UNKNOWN_TYPE`` and the raw path.
    """
    if not file:
        return UNKNOWN_TYPE, UNKNOWN_FILE
    match = MAIN_DEFAULT_PATTERN.search(file)
    if match:
        return match.group(1), match.group(2)
    return UNKNOWN_TYPE, file


def group_by_metadata_type_file(
    records: Iterable[ViolationRecord], severity: Any = None
) -> List[MetaTypeGroup]:
    types: Dict[str, Dict[str, List[ViolationRecord]]] = {}

    for record in records:
        if not matches_severity(record, severity):
            continue
        meta_type, file_key = metadata_type_and_file(record.file)
        types.setdefault(meta_type, {}).setdefault(file_key, []).append(record)

    groups: List[MetaTypeGroup] = []
    for meta_type, files in types.items():
        file_groups = [
            FileGroup(key=file_key, label=count_label(file_key, len(violations)), violations=violations)
            for file_key, violations in files.items()
        ]
        total = sum(len(group.violations) for group in file_groups)
        groups.append(
            MetaTypeGroup(key=meta_type, label=count_label(meta_type, total), files=file_groups)
        )
    return groups


def group_by_filename(
    records: Iterable[ViolationRecord], severity: Any = None
) -> List[FileGroup]:
    grouped: Dict[str, List[ViolationRecord]] = {}
    for record in records:
        if not matches_severity(record, severity):
            continue
        file_key = record.sink_file_name or record.file or UNKNOWN_FILE
        grouped.setdefault(file_key, []).append(record)

    return [
        FileGroup(key=file_key, label=file_key, violations=violations)
        for file_key, violations in grouped.items()
    ]


def group_by_rule(
    records: Iterable[ViolationRecord], severity: Any = None
) -> List[RuleGroup]:
    """Flat grouping by rule across engines."""
    buckets: Dict[Optional[str], _RuleBucket] = {}
    for record in records:
        if matches_severity(record, severity):
            _accumulate_rules(buckets, record)
    return [bucket.to_group() for bucket in buckets.values()]


__all__ = [
    "group_by_engine_rule",
    "group_by_metadata_type_file",
    "group_by_filename",
    "group_by_rule",
    "metadata_type_and_file",
]
