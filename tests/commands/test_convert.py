"""Tests for the convert command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from romanctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestConvertCommand:
    def test_arguments(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "convert", "1984", "MMXXVI", "XLII"])
        assert result.exit_code == 0
        assert result.output == "MCMLXXXIV\n2026\n42\n"

    def test_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "convert"], input="IV\n\n9\n")
        assert result.exit_code == 0
        assert result.output == "4\nIX\n"

    def test_partial_failure_warns_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "convert", "X", "IIII"])
        assert result.exit_code == 0
        assert result.stdout == "10\n"
        assert "WARNING: #1:" in result.stderr

    def test_human_mode_reports_failure_once(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert", "X", "IIII"])
        assert result.exit_code == 0
        assert "IIII" not in result.stdout
        assert "1 converted, 1 failed" in result.stdout
        assert result.stderr.count("'IIII' is not a canonical Roman numeral") == 1
        assert "WARNING: #1:" in result.stderr

    def test_json_keeps_warnings_in_payload(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "convert", "X", "0"])
        assert result.exit_code == 0
        assert result.stderr == ""
        data = json.loads(result.stdout)
        assert data["data"]["errors"][0]["code"] == "OUT_OF_RANGE"
        assert len(data["warnings"]) == 1

    def test_all_failed(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert", "IIII", "4000"])
        assert result.exit_code == 1
        assert "All 2 tokens failed" in result.stderr

    def test_empty_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert"], input="")
        assert result.exit_code == 1
        assert "No tokens" in result.stderr

    def test_human_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert", "7", "VII"])
        assert result.exit_code == 0
        assert "encode" in result.output
        assert "decode" in result.output
        assert "2 converted" in result.output
