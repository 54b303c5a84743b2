# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Shared coercion helpers for the report parser and the view engine.

Report content comes from several analysis engines and is only loosely typed:
severities may be numbers or strings, line numbers may arrive as strings and
any field can be missing. These helpers turn such values into the canonical
Python types without raising.

Functions
---------
as_int : Lenient integer conversion
as_str : Lenient string conversion (JSON-style for booleans and containers)
format_number : Render integral floats without a trailing ``.0``
severity_key : Comparable string form of a severity value
first_item : First element of a list, or a default

Examples
--------
>>> as_int("12")
12
>>> severity_key(3.0) == severity_key("3")
True
"""
from __future__ import annotations

import json
from typing import Any, Optional


def format_number(value: Any) -> str:
    """Render ints and integral floats the way the JSON source spelled them."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def as_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def as_str(value: Any) -> Optional[str]:
    """
    Convert a scalar or container to text, keeping None as None.
    Containers are rendered as compact JSON.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)
    except (TypeError, ValueError):
        return str(value)


def severity_key(value: Any) -> str:
    """String form used for severity comparison; ``3``, ``3.0`` and ``"3"`` agree."""
    text = as_str(value)
    return "" if text is None else text.strip()


def first_item(values: Any, default: Any = None) -> Any:
    if isinstance(values, list) and values:
        return values[0]
    return default


__all__ = ["as_int", "as_str", "format_number", "severity_key", "first_item"]
