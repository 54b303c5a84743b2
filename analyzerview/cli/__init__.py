# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Command-line interface for analyzerview.

This package provides the CLI application built with Typer.

Modules
-------
cli : Main CLI implementation

Examples
--------
Run from command line:
    $ python -m analyzerview render out/output.json

See Also
--------
analyzerview.application : Application logic
"""
from __future__ import annotations

from .cli import app

__all__ = ["app"]
