# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Main entry point for running analyzerview as a module.

Examples
--------
$ python -m analyzerview --help
$ python -m analyzerview render out/output.json

See Also
--------
analyzerview.cli.cli : CLI implementation
"""
from __future__ import annotations

from .cli import app


if __name__ == "__main__":
    app()
