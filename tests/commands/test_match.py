"""Tests for match CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from measurectl.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestMatchCommand:
    def test_all_match(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["match", "(12, 15)", "13", "14"])
        assert result.exit_code == 0
        assert "13: match" in result.stdout
        assert "14: match" in result.stdout

    def test_miss_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "match", "<10", "9", "10"])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["error"]["code"] == "NO_MATCH"
        assert payload["error"]["detail"]["misses"] == [10]

    def test_exact_shorthand(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "match", "=7", "7"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "OK: match"

    def test_invalid_notation(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "match", "~3", "3"])
        assert result.exit_code == 1
        assert result.stderr.startswith("ERROR: match")

    def test_values_must_be_integers(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["match", "7", "seven"])
        assert result.exit_code == 2

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["match", "--examples"])
        assert result.exit_code == 0
        assert "measurectl match" in result.output
