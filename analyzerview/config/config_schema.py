# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Configuration schema definitions.

This module defines the configuration structure, default values, and
validation logic for all application settings.

Classes
-------
Config : Main configuration class
ReportConfig : How report files are decoded
ViewsConfig : Which optional view features are active
OutputConfig : How views are printed
LoggingConfig : Logging configuration

Examples
--------
>>> config = Config(views=ViewsConfig(default_grouping="typefilename"))
>>> config.validate()
True

See Also
--------
analyzerview.config.config_loader : Configuration loading
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Union

from analyzerview.core.exceptions import ConfigurationError
from analyzerview.core.models.views import GroupingMode, ViewFeatures

TABLE_GROUPING = "table"
OUTPUT_FORMATS = {"auto", "json", "yaml"}


def _as_list(value: Union[str, List[str], None]) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return [str(part).strip() for part in value]


@dataclass
class ReportConfig:
    """How report files are decoded before normalization."""

    base64: bool = False
    encoding: str = "utf-8"

    def __post_init__(self):
        # environment values such as "1252" arrive as int
        self.encoding = str(self.encoding)

    def validate(self) -> List[str]:
        """
        Validate report configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []
        try:
            "".encode(self.encoding)
        except (LookupError, TypeError):
            errors.append(f"Unknown encoding: {self.encoding}")
        return errors


@dataclass
class ViewsConfig:
    """Optional view features and the grouping shown first."""

    search_enabled: bool = True
    severity_filter_enabled: bool = True
    grouping_modes: List[str] = field(default_factory=lambda: [
        GroupingMode.ENGINE.value,
        GroupingMode.TYPE_FILENAME.value,
    ])
    default_grouping: str = GroupingMode.ENGINE.value

    def __post_init__(self):
        # environment variables arrive as "engine,typefilename"
        self.grouping_modes = _as_list(self.grouping_modes)

    def validate(self) -> List[str]:
        """
        Validate views configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        valid_modes = {mode.value for mode in GroupingMode}
        for mode in self.grouping_modes:
            if mode not in valid_modes:
                errors.append(f"Unknown grouping mode: {mode}")

        if self.default_grouping != TABLE_GROUPING and self.default_grouping not in self.grouping_modes:
            errors.append(
                f"default_grouping '{self.default_grouping}' must be '{TABLE_GROUPING}' "
                f"or one of grouping_modes"
            )

        return errors

    def to_features(self) -> ViewFeatures:
        return ViewFeatures(
            search=self.search_enabled,
            severity_filter=self.severity_filter_enabled,
            grouping_modes=tuple(GroupingMode(mode) for mode in self.grouping_modes),
        )

    def default_grouping_mode(self):
        if self.default_grouping == TABLE_GROUPING:
            return None
        return GroupingMode(self.default_grouping)


@dataclass
class OutputConfig:
    """How the CLI prints views."""

    format: str = "auto"
    indent: int = 2

    def validate(self) -> List[str]:
        """
        Validate output configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if self.format not in OUTPUT_FORMATS:
            errors.append(f"Invalid output format: {self.format}")

        if self.indent < 0:
            errors.append(f"indent must be >= 0, got {self.indent}")

        return errors


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "WARNING"
    file: str = "logs/analyzerview.log"
    console: bool = True
    file_output: bool = False
    max_bytes: int = 10 * 1024 * 1024  # 10 MB
    backup_count: int = 5

    def validate(self) -> List[str]:
        """
        Validate logging configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.level.upper() not in valid_levels:
            errors.append(f"Invalid log level: {self.level}")

        if self.max_bytes < 1024:
            errors.append(f"max_bytes too small: {self.max_bytes}")

        if self.backup_count < 0:
            errors.append(f"backup_count must be >= 0, got {self.backup_count}")

        return errors


@dataclass
class Config:
    """
    Main configuration class for analyzerview.

    This class aggregates all configuration sections and provides
    validation and loading functionality.
    """

    report: ReportConfig = field(default_factory=ReportConfig)
    views: ViewsConfig = field(default_factory=ViewsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> bool:
        """
        Validate entire configuration.

        Returns:
            True if valid, raises ConfigurationError if invalid

        Raises:
            ConfigurationError: If any validation fails
        """
        all_errors = []

        all_errors.extend(self.report.validate())
        all_errors.extend(self.views.validate())
        all_errors.extend(self.output.validate())
        all_errors.extend(self.logging.validate())

        if all_errors:
            error_msg = "\n".join(f"  - {err}" for err in all_errors)
            raise ConfigurationError(
                "configuration",
                f"Configuration validation failed:\n{error_msg}",
                {"errors": all_errors}
            )

        return True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """
        Create configuration from dictionary.

        Args:
            config_dict: Dictionary with configuration values

        Returns:
            Config instance

        Raises:
            ConfigurationError: If a section contains unknown options
        """
        sections = {
            "report": ReportConfig,
            "views": ViewsConfig,
            "output": OutputConfig,
            "logging": LoggingConfig,
        }
        values = {}
        for name, section_cls in sections.items():
            try:
                values[name] = section_cls(**(config_dict.get(name) or {}))
            except TypeError as e:
                raise ConfigurationError(name, f"Invalid options: {e}")
        return cls(**values)


def get_default_config() -> Config:
    """
    Get default configuration.

    Returns:
        Config instance with default values
    """
    return Config()
