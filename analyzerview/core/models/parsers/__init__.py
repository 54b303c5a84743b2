# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Report parsers.

Functions
---------
normalize : Parse decoded report text into a NormalizedReport
to_records : Transform a parsed report document into ViolationRecords

Examples
--------
>>> from analyzerview.core.models.parsers import normalize
>>> normalize('{"violations": []}').mode.value
'FlatDump'

See Also
--------
analyzerview.core.models.records : Canonical record model
"""
from __future__ import annotations

from .report import RawViolation, normalize, to_records

__all__ = [
    "RawViolation",
    "normalize",
    "to_records",
]
