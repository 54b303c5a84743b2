# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Data models for analyzerview.

Modules
-------
records : Canonical violation records
views : Grouped views, display descriptors and output contracts
parsers : Report text to records
schema : Flat re-export of the public models
"""
from __future__ import annotations
