"""Tests for the not-empty CLI command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from valrule.cli import cli


class TestNotEmptyCommand:
    def test_pass(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["not-empty", "hello"])
        assert result.exit_code == 0
        assert 'OK: not_empty "hello"' in result.output

    def test_empty_list_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["not-empty", "[]"])
        assert result.exit_code == 1
        assert "must not be empty" in result.output

    def test_null_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["not-empty", "null"])
        assert result.exit_code == 1

    def test_zero_passes(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["not-empty", "0"])
        assert result.exit_code == 0

    def test_custom_message(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["not-empty", '""', "--message", "name is required"])
        assert result.exit_code == 1
        assert "name is required" in result.output

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "not-empty", "{}"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["rule"] == "not_empty"
        assert data["value"] == {}
        assert data["error"]["code"] == "empty"

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "not-empty", "[1]"])
        assert result.exit_code == 0
        assert result.output.strip() == "OK"

    def test_message_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "valrule.toml").write_text('[messages]\nnot_empty = "fill this in"\n')
        result = cli_runner.invoke(cli, ["not-empty", "[]"])
        assert result.exit_code == 1
        assert "fill this in" in result.output

    def test_message_flag_beats_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "valrule.toml").write_text('[messages]\nnot_empty = "fill this in"\n')
        result = cli_runner.invoke(cli, ["not-empty", "[]", "--message", "flag wins"])
        assert "flag wins" in result.output
        assert "fill this in" not in result.output

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["not-empty", "--examples"])
        assert result.exit_code == 0
        assert "valrule not-empty" in result.output
