# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Configuration loader for analyzerview.

This module handles loading configuration from multiple sources with
well-defined precedence rules.

Configuration Sources
---------------------
Priority order (highest to lowest):

1. Command-line arguments (highest priority)
2. Environment variables (prefixed with ANALYZERVIEW_), optionally read
   from a ``.env`` file
3. Configuration file (YAML or TOML)
4. Default values (lowest priority)

Supported Formats
-----------------
- YAML: .yaml, .yml files
- TOML: .toml files (tomllib, or tomli on older interpreters)

Environment Variables
---------------------
All environment variables must be prefixed with ``ANALYZERVIEW_``. Use a
double underscore between section and option: ``ANALYZERVIEW_VIEWS__DEFAULT_GROUPING``.

Examples
--------
Load from YAML file:
    >>> loader = ConfigLoader()
    >>> config = loader.load_config('analyzerview.yaml')
    >>> config.views.default_grouping
    'engine'

Load with environment variable override:
    >>> import os
    >>> os.environ['ANALYZERVIEW_OUTPUT__FORMAT'] = 'yaml'
    >>> config = loader.load_config('analyzerview.yaml')

See Also
--------
config_schema : Configuration schema definitions
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import find_dotenv, load_dotenv

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from .config_schema import Config
from analyzerview.core.exceptions import ConfigurationError
from analyzerview.core.logging_config import get_logger

logger = get_logger(__name__)


class ConfigLoader:
    """Configuration loader that supports multiple sources.

    Attributes
    ----------
    ENV_PREFIX : str
        Prefix for environment variables ('ANALYZERVIEW_').
    config : Config
        Internal configuration object.

    Notes
    -----
    The loader validates the merged result, so invalid configurations raise
    ConfigurationError before any report is rendered.
    """

    ENV_PREFIX = "ANALYZERVIEW_"

    def __init__(self):
        """Initialize configuration loader with default config."""
        self.config = Config()

    def load_from_file(self, file_path: str) -> Config:
        """
        Load configuration from a file.

        Supports YAML and TOML formats based on file extension.

        Args:
            file_path: Path to configuration file

        Returns:
            Config instance

        Raises:
            ConfigurationError: If file cannot be loaded or parsed
        """
        path = Path(file_path)

        if not path.exists():
            raise ConfigurationError(
                "file_path",
                f"Configuration file not found: {file_path}"
            )

        try:
            if path.suffix in ['.yaml', '.yml']:
                with open(path, 'r', encoding='utf-8') as f:
                    config_dict = yaml.safe_load(f) or {}
            elif path.suffix == '.toml':
                with open(path, 'rb') as f:
                    config_dict = tomllib.load(f)
            else:
                raise ConfigurationError(
                    "file_format",
                    f"Unsupported configuration file format: {path.suffix}"
                )
        except yaml.YAMLError as e:
            raise ConfigurationError(
                "yaml_parse",
                f"Failed to parse YAML configuration: {e}"
            )
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(
                "toml_parse",
                f"Failed to parse TOML configuration: {e}"
            )
        except OSError as e:
            raise ConfigurationError(
                "file_load",
                f"Failed to load configuration file: {e}"
            )

        if not isinstance(config_dict, dict):
            raise ConfigurationError(
                "file_format",
                f"Configuration file must contain a mapping, got {type(config_dict).__name__}"
            )

        # Handle nested 'analyzerview' key if present
        if 'analyzerview' in config_dict:
            config_dict = config_dict['analyzerview'] or {}

        logger.debug("Loaded configuration from %s", path)
        self.config = Config.from_dict(config_dict)
        return self.config

    def load_from_env(self, dotenv_path: Optional[str] = None) -> Config:
        """
        Load configuration from environment variables.

        Example:
            ANALYZERVIEW_REPORT__BASE64=true
            ANALYZERVIEW_VIEWS__GROUPING_MODES=engine,typefilename,rule
            ANALYZERVIEW_LOGGING__LEVEL=DEBUG

        Args:
            dotenv_path: ``.env`` file read into the environment first. When
                omitted, a ``.env`` file in the working directory or its
                parents is used when present.

        Returns:
            Config instance with values from environment
        """
        load_dotenv(dotenv_path or find_dotenv(usecwd=True), override=False)

        env_config: Dict[str, Dict[str, Any]] = {}

        for key, value in os.environ.items():
            if key.startswith(self.ENV_PREFIX):
                config_key = key[len(self.ENV_PREFIX):].lower()
                parts = config_key.split('__')

                if len(parts) == 2:
                    section, option = parts
                    env_config.setdefault(section, {})[option] = self._parse_value(value)

        if env_config:
            self._merge_config(env_config)

        return self.config

    def load_from_args(self, args: Dict[str, Any]) -> Config:
        """
        Load configuration from command-line arguments.

        Args:
            args: Dictionary of argument names and values

        Returns:
            Config instance with values from arguments
        """
        if not args:
            return self.config

        arg_mapping = {
            'base64': ('report', 'base64'),
            'encoding': ('report', 'encoding'),
            'format': ('output', 'format'),
            'indent': ('output', 'indent'),
            'log_level': ('logging', 'level'),
            'log_file': ('logging', 'file'),
        }

        partial: Dict[str, Dict[str, Any]] = {}
        for arg_name, value in args.items():
            if value is not None and arg_name in arg_mapping:
                section, option = arg_mapping[arg_name]
                partial.setdefault(section, {})[option] = value

        self._merge_config(partial)
        return self.config

    def load_config(
        self,
        config_file: Optional[str] = None,
        env: bool = True,
        args: Optional[Dict[str, Any]] = None,
        dotenv_path: Optional[str] = None,
    ) -> Config:
        """
        Load configuration from multiple sources.

        Args:
            config_file: Path to configuration file (optional)
            env: Whether to load from environment variables
            args: Command-line arguments dictionary (optional)
            dotenv_path: ``.env`` file to read before the environment (optional)

        Returns:
            Validated Config instance

        Raises:
            ConfigurationError: If configuration is invalid
        """
        self.config = Config()

        if config_file:
            self.load_from_file(config_file)

        if env:
            self.load_from_env(dotenv_path)

        if args:
            self.load_from_args(args)

        self.config.validate()

        return self.config

    def _merge_config(self, partial_config: Dict[str, Dict[str, Any]]):
        """
        Merge partial configuration into existing config.

        Unknown sections and options are ignored.
        """
        for section, values in partial_config.items():
            if not hasattr(self.config, section):
                continue
            section_obj = getattr(self.config, section)
            for key, value in values.items():
                if hasattr(section_obj, key):
                    setattr(section_obj, key, value)
            if hasattr(section_obj, '__post_init__'):
                section_obj.__post_init__()

    @staticmethod
    def _parse_value(value: str) -> Any:
        """
        Parse string value to appropriate type.

        Args:
            value: String value from environment variable

        Returns:
            Parsed value (bool, int, float, or str)
        """
        if value.lower() in ('true', 'yes', 'on'):
            return True
        if value.lower() in ('false', 'no', 'off'):
            return False

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        return value


def load_config(
    config_file: Optional[str] = None,
    env: bool = True,
    args: Optional[Dict[str, Any]] = None,
    dotenv_path: Optional[str] = None,
) -> Config:
    """
    Convenience function to load configuration.

    Returns:
        Validated Config instance
    """
    loader = ConfigLoader()
    return loader.load_config(config_file=config_file, env=env, args=args, dotenv_path=dotenv_path)
