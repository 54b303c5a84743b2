# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""analyzerview - Grouped and filtered views of code analysis reports.

analyzerview takes the JSON report written by a multi-engine code analyzer
(PMD, ESLint, CPD, RetireJS, Flow, Regex and the Salesforce Graph Engine) and
turns it into display-ready views:

- Canonical, flat violation records
- Engine/Rule, Metadata type/File, Filename and Rule groupings
- A single-select severity filter and a free-text search
- Labels, counts and column descriptors for the presentation layer

Examples
--------
Render a report from the command line:
    $ python -m analyzerview render out/output.json --group-by typefilename

See Also
--------
analyzerview.cli.cli : Command-line interface
analyzerview.application : Filtering, grouping and view state
analyzerview.core : Models, parser and exceptions
"""
from __future__ import annotations

__version__ = "1.0.0"
__author__ = "Anush Krishna"
__license__ = "MIT"

__all__ = ["__version__", "__author__", "__license__"]
