"""Tests for compose CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from measurectl.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestComposeCommand:
    def test_exact_sum(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compose", "3", "4"])
        assert result.exit_code == 0
        assert "result: 7" in result.stdout
        assert "kind: exact" in result.stdout

    def test_quiet_prints_notation(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "compose", "(2, 5)", "10"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "(12, 15)"

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["--json", "compose", "<5", "<5", "--candidate", "9", "--candidate", "10"],
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["result"] == "<10"
        assert data["data"]["kind"] == "upper_bound"
        assert [c["matches"] for c in data["data"]["candidates"]] == [True, False]

    def test_range_then_upper_bound(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "compose", "(1, 4)", "<2"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "(1, 6)"

    def test_invalid_notation(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "compose", "3", "[1, 2]"])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["error"]["code"] == "INVALID_NOTATION"

    def test_negative_bound_rejected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "compose", "(1, 4)", "<-5"])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["error"]["code"] == "INVALID_NOTATION"

    def test_inverted_range_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compose", "(5, 1)", "1"])
        assert result.exit_code == 0
        assert "WARNING: (5, 1) can never be satisfied" in result.stderr

    def test_requires_arguments(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compose"])
        assert result.exit_code == 2

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compose", "--examples"])
        assert result.exit_code == 0
        assert "--candidate 9" in result.output
