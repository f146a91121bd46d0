"""Tests for the decode command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from romanctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestDecodeCommand:
    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "MMMCMXCIX"])
        assert result.exit_code == 0
        assert "OK" in result.output
        assert "3999" in result.output

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "decode", "MMMDCCCLXXXVIII"])
        assert result.exit_code == 0
        assert result.output == "3888\n"

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "decode", "XLII"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "decode"
        assert data["data"]["value"] == 42

    @pytest.mark.parametrize("numeral", ["IIII", "VIIII", "IIV", "iv", "MMMM", ""])
    def test_invalid_exits_1_on_stderr(self, cli_runner: CliRunner, numeral: str) -> None:
        result = cli_runner.invoke(cli, ["decode", numeral])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "ERROR" in result.stderr

    def test_json_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "decode", "IIII"])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["ok"] is False
        assert data["error"]["code"] == "INVALID_NUMERAL"
        assert data["error"]["detail"]["remainder"] == "I"

    def test_case_insensitive_via_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "romanctl.toml").write_text("[convert]\ncase_sensitive = false\n")
        result = cli_runner.invoke(cli, ["-q", "decode", "xiv"])
        assert result.exit_code == 0
        assert result.output == "14\n"

    def test_case_insensitive_via_env(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ROMANCTL_CONVERT__CASE_SENSITIVE", "false")
        result = cli_runner.invoke(cli, ["-q", "decode", "mmxxvi"])
        assert result.output == "2026\n"
