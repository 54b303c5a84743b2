# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Configuration management for analyzerview.

This package handles application configuration loading from files,
environment variables, command-line arguments and defaults.

Modules
-------
config_loader : Configuration loading utilities
config_schema : Configuration data models

Examples
--------
>>> from analyzerview.config import ConfigLoader
>>> loader = ConfigLoader()
>>> config = loader.load_config("analyzerview.yaml")

See Also
--------
analyzerview.core.exceptions : Configuration errors
"""
from __future__ import annotations

from .config_schema import (
    Config,
    ReportConfig,
    ViewsConfig,
    OutputConfig,
    LoggingConfig,
    get_default_config,
)
from .config_loader import ConfigLoader, load_config

__all__ = [
    'Config',
    'ReportConfig',
    'ViewsConfig',
    'OutputConfig',
    'LoggingConfig',
    'get_default_config',
    'ConfigLoader',
    'load_config',
]
