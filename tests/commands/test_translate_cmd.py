"""Tests for the `translate` command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from timeman.cli import cli

REFERENCE_DATE = "Mon, 22 Apr 2024 18:20:29 +0300"


class TestTranslate:
    @pytest.mark.parametrize("name", ["translate", "t"])
    def test_format_and_offset(self, cli_runner: CliRunner, name: str) -> None:
        result = cli_runner.invoke(
            cli, [name, REFERENCE_DATE, "-F", "%F %T %z", "-O", "+00:00"]
        )
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "2024-04-22 15:20:29 +0000"

    def test_offset_only(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["t", REFERENCE_DATE, "--to-offset=-05:00"])
        assert result.stdout.strip() == "Mon, 22 Apr 2024 10:20:29 -0500"

    def test_format_only(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["t", REFERENCE_DATE, "--to-format", "%D %R"])
        assert result.stdout.strip() == "04/22/24 18:20"

    def test_microsecond_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-f", "%+", "t", "2024-04-22T18:20:29.306665+03:00", "-F", "%T.%f"]
        )
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "18:20:29.306665"

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "t", REFERENCE_DATE, "-O", "+00:00"])
        payload = json.loads(result.stdout)
        assert payload["data"]["iso"] == "2024-04-22T15:20:29+00:00"

    def test_invalid_to_format_exits_11(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["t", REFERENCE_DATE, "-F", "%Q"])
        assert result.exit_code == 11
        assert "ERROR: translate" in result.stderr

    def test_invalid_to_offset_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["t", REFERENCE_DATE, "-O", "east"])
        assert result.exit_code == 1

    def test_invalid_global_offset_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-o", "bogus", "t", REFERENCE_DATE, "-F", "%F"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "ERROR: translate" in result.stderr

    def test_bad_date_exits_5(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["t", "2024-04-22", "-F", "%F"])
        assert result.exit_code == 5
