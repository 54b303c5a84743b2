# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Static configuration data shared by the view engine."""
from __future__ import annotations

import re
from typing import Dict

UNKNOWN_FILE = "Unknown File"
UNKNOWN_TYPE = "Unknown"
NO_VIOLATIONS_MESSAGE = "No Violations Found"

# <project>/force-app/main/default/<metadata type>/<rest of path>
MAIN_DEFAULT_PATTERN = re.compile(r"main/default/([^/]+)/(.+)")

SEVERITY_PREFIX = "sev"
SEVERITY_BUTTON_VARIANT = "brand"

ENGINE_DESCRIPTIONS: Dict[str, str] = {
    "cpd": "Copy-Paste Detector: Finds duplicate code blocks in Apex and other supported languages.",
    "eslint": "Analyzes JavaScript and Lightning Web Components for code quality and style issues.",
    "flow": "Analyzes Salesforce Flows for best practices, security, and maintainability issues.",
    "pmd": "Performs static analysis on Apex, Visualforce. Includes the PMD AppExchange rules.",
    "regex": "Detects code patterns using regular expressions. Useful for enforcing simple, custom rules.",
    "retirejs": "Scans JavaScript libraries for known security vulnerabilities.",
    "sfge": "Salesforce Graph Engine: Advanced static analysis for security, CRUD/FLS, and data flow in Apex.",
}

__all__ = [
    "UNKNOWN_FILE",
    "UNKNOWN_TYPE",
    "NO_VIOLATIONS_MESSAGE",
    "MAIN_DEFAULT_PATTERN",
    "SEVERITY_PREFIX",
    "SEVERITY_BUTTON_VARIANT",
    "ENGINE_DESCRIPTIONS",
]
