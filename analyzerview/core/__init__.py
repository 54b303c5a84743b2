# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Core domain logic for analyzerview.

This package contains the data models, the report parser, exceptions and
logging configuration.
"""
from __future__ import annotations

from .exceptions import (
    AnalyzerViewError,
    ConfigurationError,
    FileSystemError,
    ParserError,
    ValidationError,
)

__all__ = [
    "AnalyzerViewError",
    "ConfigurationError",
    "FileSystemError",
    "ParserError",
    "ValidationError",
]
