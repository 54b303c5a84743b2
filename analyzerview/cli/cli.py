# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""analyzerview CLI - Command Line Interface.

Render a code analysis report (``output.json``) as the grouped, filterable
views used by the report viewer, straight from the terminal.

Synopsis
--------
render
    Print the view for a report as JSON or YAML
summary
    Print counts and labels for a report

Options
-------
render command options:
    --base64 / --no-base64
        Report file body is base64-encoded (default: from config)
    --group-by, -g
        engine, typefilename, filename, rule or table
    --severity, -s
        Only show violations of this severity
    --search, -q
        Only show violations containing this text
    --format, -f
        auto, json or yaml. auto prints YAML for non-violation documents
        and the raw text for documents that are not JSON.

Examples
--------
Group a report by engine and rule:
    $ python -m analyzerview render out/output.json

Severity 1 violations grouped by metadata type:
    $ python -m analyzerview render out/output.json -g typefilename -s 1

Notes
-----
Settings come from ``--config`` (YAML/TOML), ``ANALYZERVIEW_*`` environment
variables and the options above, in increasing order of precedence.
Variables in ``--env-file`` (default: the nearest ``.env`` upward from the
working directory) are loaded into the environment unless already set.

See Also
--------
analyzerview.application.view_state : View rendering
analyzerview.config : Configuration loading
"""
from __future__ import annotations

import json
from enum import Enum
from typing import Any, Dict, Optional

import typer
import yaml

from analyzerview.application.file import read_report
from analyzerview.application.view_state import (
    initial_state,
    render_view,
    select_severity,
    set_grouping,
    set_search,
)
from analyzerview.application.grouping import group_by_engine_rule
from analyzerview.application.projector import severity_levels
from analyzerview.config import Config, load_config
from analyzerview.config.config_schema import TABLE_GROUPING
from analyzerview.core.exceptions import AnalyzerViewError
from analyzerview.core.logging_config import get_logger, setup_logging
from analyzerview.core.models.parsers import normalize
from analyzerview.core.models.views import (
    FlatDumpView,
    GroupingMode,
    RawView,
    ReportMode,
    ViewOutput,
)


app = typer.Typer(
    help="analyzerview CLI - grouped and filtered views of code analysis reports",
    add_completion=False
)

logger = get_logger(__name__)


class GroupBy(str, Enum):
    engine = "engine"
    typefilename = "typefilename"
    filename = "filename"
    rule = "rule"
    table = TABLE_GROUPING


class OutputFormat(str, Enum):
    auto = "auto"
    json = "json"
    yaml = "yaml"


def _load(config_file: Optional[str], args: Dict[str, Any], env_file: Optional[str] = None) -> Config:
    config = load_config(config_file=config_file, args=args, dotenv_path=env_file)
    setup_logging(
        log_level=config.logging.level,
        log_file=config.logging.file,
        console_output=config.logging.console,
        file_output=config.logging.file_output,
        max_bytes=config.logging.max_bytes,
        backup_count=config.logging.backup_count,
    )
    return config


def _fail(error: AnalyzerViewError) -> None:
    logger.debug("Command failed: %s", error.details)
    typer.echo(f"Error: {error.message}", err=True)
    raise typer.Exit(code=1)


def _yaml(data: Any) -> str:
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)


def format_view(view: ViewOutput, fmt: str, indent: int = 2) -> str:
    """Serialize a view for the terminal."""
    if fmt == OutputFormat.yaml.value:
        return _yaml(view.to_dict())
    if fmt == OutputFormat.json.value:
        return json.dumps(view.to_dict(), indent=indent or None, ensure_ascii=False)

    if isinstance(view, RawView):
        return view.text
    if isinstance(view, FlatDumpView):
        return _yaml(view.to_dict()["payload"])
    return json.dumps(view.to_dict(), indent=indent or None, ensure_ascii=False)


@app.command("render")
def render(
    report_path: str = typer.Argument(..., help="Report file, or a directory containing output.json"),
    base64_encoded: Optional[bool] = typer.Option(
        None, "--base64/--no-base64", help="Report body is base64-encoded"
    ),
    group_by: Optional[GroupBy] = typer.Option(
        None, "--group-by", "-g", help="Grouping mode (default: from config)"
    ),
    severity: Optional[str] = typer.Option(
        None, "--severity", "-s", help="Only show violations of this severity"
    ),
    search: Optional[str] = typer.Option(
        None, "--search", "-q", help="Only show violations containing this text"
    ),
    output_format: Optional[OutputFormat] = typer.Option(
        None, "--format", "-f", help="Output format: auto, json, yaml"
    ),
    config_file: Optional[str] = typer.Option(
        None, "--config", "-c", help="YAML or TOML configuration file"
    ),
    env_file: Optional[str] = typer.Option(
        None, "--env-file", help=".env file with ANALYZERVIEW_* settings (default: nearest .env)"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)"
    ),
) -> None:
    """Render the view of a report."""
    try:
        config = _load(config_file, {
            "base64": base64_encoded,
            "format": output_format.value if output_format else None,
            "log_level": log_level,
        }, env_file)
        features = config.views.to_features()

        text = read_report(
            report_path,
            base64_encoded=config.report.base64,
            encoding=config.report.encoding,
        )
        state = initial_state(normalize(text), features, config.views.default_grouping_mode())

        if group_by is not None:
            mode = None if group_by == GroupBy.table else GroupingMode(group_by.value)
            state = set_grouping(state, mode, features)
        if severity:
            state = select_severity(state, severity, features)
        if search:
            state = set_search(state, search, features)

        view = render_view(state, features)
    except AnalyzerViewError as e:
        _fail(e)

    typer.echo(format_view(view, config.output.format, config.output.indent))


@app.command("summary")
def summary(
    report_path: str = typer.Argument(..., help="Report file, or a directory containing output.json"),
    base64_encoded: Optional[bool] = typer.Option(
        None, "--base64/--no-base64", help="Report body is base64-encoded"
    ),
    config_file: Optional[str] = typer.Option(
        None, "--config", "-c", help="YAML or TOML configuration file"
    ),
    env_file: Optional[str] = typer.Option(
        None, "--env-file", help=".env file with ANALYZERVIEW_* settings (default: nearest .env)"
    ),
) -> None:
    """Print violation counts per severity and per engine."""
    try:
        config = _load(config_file, {"base64": base64_encoded}, env_file)
        text = read_report(
            report_path,
            base64_encoded=config.report.base64,
            encoding=config.report.encoding,
        )
    except AnalyzerViewError as e:
        _fail(e)

    report = normalize(text)
    typer.echo(f"Mode: {report.mode.value}")
    if report.mode != ReportMode.TABULAR:
        return

    typer.echo(f"Violations: {len(report.records)}")
    for level in severity_levels(report.violation_counts):
        typer.echo(f"  {level.label}")

    typer.echo("=" * 60)
    for engine in group_by_engine_rule(report.records):
        typer.echo(engine.label)
        if engine.description:
            typer.echo(f"  {engine.description}")
        for rule in engine.rules:
            typer.echo(f"    {rule.label}")
