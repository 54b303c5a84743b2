"""Tests for the command line interface."""

import base64
import json
import os

import pytest
import yaml
from typer.testing import CliRunner

from analyzerview.cli import app

runner = CliRunner()


@pytest.fixture
def report_file(tmp_path, sample_text):
    path = tmp_path / "output.json"
    path.write_text(sample_text, encoding="utf-8")
    return path


def _render(*args):
    result = runner.invoke(app, ["render", *[str(a) for a in args]])
    assert result.exit_code == 0, result.output
    return result


class TestRender:
    def test_default_json(self, report_file):
        data = json.loads(_render(report_file).stdout)
        assert data["mode"] == "GroupedByEngine"
        assert data["recordCount"] == 5
        assert [e["label"] for e in data["tree"]] == ["pmd (3)", "eslint (1)", "sfge (1)"]

    def test_directory_argument(self, report_file):
        data = json.loads(_render(report_file.parent).stdout)
        assert data["recordCount"] == 5

    def test_table(self, report_file):
        data = json.loads(_render(report_file, "-g", "table").stdout)
        assert data["mode"] == "Tabular"
        assert len(data["rows"]) == 5

    def test_grouping_and_severity(self, report_file):
        data = json.loads(_render(report_file, "-g", "typefilename", "-s", "1").stdout)
        assert data["mode"] == "GroupedByMetadataType"
        assert data["visibleCount"] == 1
        assert data["tree"][0]["label"] == "classes (1)"
        assert data["tree"][0]["files"][0]["key"] == "ContactService.cls"

    def test_search(self, report_file):
        data = json.loads(_render(report_file, "-q", "LWC").stdout)
        assert data["visibleCount"] == 1
        assert data["tree"][0]["key"] == "eslint"

    def test_yaml_format(self, report_file):
        data = yaml.safe_load(_render(report_file, "--format", "yaml").stdout)
        assert data["mode"] == "GroupedByEngine"

    def test_disabled_grouping_fails(self, report_file):
        result = runner.invoke(app, ["render", str(report_file), "-g", "rule"])
        assert result.exit_code == 1
        assert "Error" in result.output
        assert "not enabled" in result.output

    def test_grouping_enabled_by_config(self, report_file, tmp_path):
        config = tmp_path / "analyzerview.yaml"
        config.write_text("views:\n  grouping_modes: engine,typefilename,rule\n")
        data = json.loads(_render(report_file, "-c", config, "-g", "rule").stdout)
        assert data["mode"] == "GroupedByRule"

    def test_env_file(self, report_file, tmp_path):
        env_file = tmp_path / "settings.env"
        env_file.write_text("ANALYZERVIEW_OUTPUT__FORMAT=yaml\n")
        try:
            result = _render(report_file, "--env-file", env_file)
        finally:
            os.environ.pop("ANALYZERVIEW_OUTPUT__FORMAT", None)
        assert result.stdout.startswith("mode: GroupedByEngine")
        assert yaml.safe_load(result.stdout)["mode"] == "GroupedByEngine"

    def test_flat_dump_prints_yaml(self, tmp_path):
        path = tmp_path / "output.json"
        path.write_text('{"runDir": "/tmp", "violations": []}')
        result = _render(path)
        assert yaml.safe_load(result.stdout) == {"runDir": "/tmp", "violations": []}

    def test_raw_prints_text(self, tmp_path):
        path = tmp_path / "output.json"
        path.write_text("analysis failed")
        assert _render(path).stdout.strip() == "analysis failed"

    def test_base64(self, tmp_path, sample_text):
        path = tmp_path / "output.b64"
        path.write_bytes(base64.b64encode(sample_text.encode("utf-8")))
        data = json.loads(_render(path, "--base64").stdout)
        assert data["recordCount"] == 5

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["render", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_invalid_config(self, report_file, tmp_path):
        config = tmp_path / "analyzerview.yaml"
        config.write_text("views:\n  default_grouping: bogus\n")
        result = runner.invoke(app, ["render", str(report_file), "-c", str(config)])
        assert result.exit_code == 1


class TestSummary:
    def test_summary(self, report_file):
        result = runner.invoke(app, ["summary", str(report_file)])
        assert result.exit_code == 0, result.output
        lines = result.stdout.splitlines()
        assert lines[0] == "Mode: Tabular"
        assert lines[1] == "Violations: 5"
        assert "  Severity 1: 1" in lines
        assert "pmd (3)" in lines
        assert "    ApexCRUDViolation (2)" in lines

    def test_summary_of_raw_report(self, tmp_path):
        path = tmp_path / "output.json"
        path.write_text("oops")
        result = runner.invoke(app, ["summary", str(path)])
        assert result.exit_code == 0
        assert result.stdout.strip() == "Mode: Raw"
