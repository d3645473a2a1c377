"""Tests for the Typer CLI."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from unattend_validator.config.loader import clear_cache
from unattend_validator.presentation.cli.app import app

from unattend_factory import (
    SHELL_SETUP,
    TERMINAL_SERVICES,
    auto_logon,
    complete_unattend,
    component,
    settings,
    unattend,
    write,
)

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated(tmp_path, monkeypatch):
    """Run every command from a scratch directory with a fresh config cache."""
    monkeypatch.chdir(tmp_path)
    clear_cache()
    yield
    clear_cache()


def _failing_unattend() -> str:
    return unattend(settings("oobeSystem", component(SHELL_SETUP, auto_logon("true"))))


class TestValidateCommand:
    def test_passing_file_exits_zero_and_writes_default_report(self, tmp_path):
        path = write(tmp_path, complete_unattend())
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 0, result.output
        assert "PASS" in result.output
        report = tmp_path / "unattend_validation_report.txt"
        assert report.exists()
        assert "Overall Status: PASS" in report.read_text(encoding="utf-8")

    def test_failing_file_exits_one(self, tmp_path):
        path = write(tmp_path, _failing_unattend())
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 1
        assert "FAIL" in result.output

    def test_malformed_file_still_writes_report(self, tmp_path):
        path = write(tmp_path, "<unattend>")
        report = tmp_path / "custom.txt"
        result = runner.invoke(app, ["validate", str(path), "--report", str(report)])
        assert result.exit_code == 1
        content = report.read_text(encoding="utf-8")
        assert "XML Well-Formed: No" in content
        assert "Errors: 1" in content

    def test_missing_file_is_a_usage_error(self, tmp_path):
        result = runner.invoke(app, ["validate", str(tmp_path / "nope.xml")])
        assert result.exit_code == 2
        assert not (tmp_path / "unattend_validation_report.txt").exists()

    def test_detailed_lists_findings(self, tmp_path):
        path = write(tmp_path, complete_unattend())
        result = runner.invoke(app, ["validate", str(path), "--detailed"])
        assert result.exit_code == 0
        assert "Information" in result.output
        assert "RDP is enabled" in result.output

    def test_detailed_does_not_change_exit_code(self, tmp_path):
        path = write(tmp_path, _failing_unattend())
        plain = runner.invoke(app, ["validate", str(path)])
        detailed = runner.invoke(app, ["validate", str(path), "-d"])
        assert plain.exit_code == detailed.exit_code == 1

    def test_json_output(self, tmp_path):
        path = write(tmp_path, _failing_unattend())
        result = runner.invoke(app, ["validate", str(path), "--json"])
        assert result.exit_code == 1
        assert '"overall_valid": false' in result.output

    def test_config_changes_default_report_name(self, tmp_path):
        cfg = tmp_path / "cfg.json"
        cfg.write_text(json.dumps({"report": {"default_filename": "build.txt"}}), encoding="utf-8")
        path = write(tmp_path, complete_unattend())
        result = runner.invoke(app, ["validate", str(path), "--config", str(cfg)])
        assert result.exit_code == 0
        assert (tmp_path / "build.txt").exists()

    def test_bad_config_is_a_usage_error(self, tmp_path):
        path = write(tmp_path, complete_unattend())
        result = runner.invoke(app, ["validate", str(path), "--config", str(tmp_path / "x.json")])
        assert result.exit_code == 2

    def test_broken_schema_is_a_usage_error(self, tmp_path):
        path = write(tmp_path, complete_unattend())
        schema = write(tmp_path, "<xs:schema", name="broken.xsd")
        result = runner.invoke(app, ["validate", str(path), "--schema", str(schema)])
        assert result.exit_code == 2

    def test_detailed_shows_bracketed_text_literally(self, tmp_path):
        xml = unattend(
            settings(
                "specialize",
                component(TERMINAL_SERVICES, "<fDenyTSConnections>[/red]</fDenyTSConnections>"),
                component("Foo[/x]"),
            )
        )
        path = write(tmp_path, xml)
        result = runner.invoke(app, ["validate", str(path), "--detailed"])
        assert result.exit_code == 0, result.output
        assert "Foo[/x]" in result.output
        assert "PASS" in result.output

    def test_bracketed_file_name_in_summary(self, tmp_path):
        path = write(tmp_path, complete_unattend(), name="image[/b].xml")
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 0, result.output
        assert "PASS" in result.output

    def test_unwritable_report(self, tmp_path):
        path = write(tmp_path, complete_unattend())
        result = runner.invoke(
            app, ["validate", str(path), "--report", str(tmp_path / "no" / "such" / "r.txt")]
        )
        assert result.exit_code == 1


class TestOtherCommands:
    def test_rules(self):
        result = runner.invoke(app, ["rules"])
        assert result.exit_code == 0
        assert "Namespace" in result.output

    def test_config_show(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "default_filename" in result.output

    def test_config_show_missing_file(self, tmp_path):
        result = runner.invoke(app, ["config", "show", "--config", str(tmp_path / "missing.json")])
        assert result.exit_code == 2
        assert not isinstance(result.exception, FileNotFoundError)

    def test_config_show_malformed_file(self, tmp_path):
        (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
        result = runner.invoke(app, ["config", "show", "--config", "broken.json"])
        assert result.exit_code == 2

    def test_config_init_and_validate(self, tmp_path):
        result = runner.invoke(app, ["config", "init", "--output", "mine.json"])
        assert result.exit_code == 0
        assert (tmp_path / "mine.json").exists()

        result = runner.invoke(app, ["config", "validate", "mine.json"])
        assert result.exit_code == 0
        assert "Valid configuration" in result.output

    def test_config_validate_rejects_bad_file(self, tmp_path):
        (tmp_path / "bad.json").write_text("[]", encoding="utf-8")
        result = runner.invoke(app, ["config", "validate", "bad.json"])
        assert result.exit_code == 1
