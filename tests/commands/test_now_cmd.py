"""Tests for the `now` command and global output flags."""

from __future__ import annotations

import json
import re
from pathlib import Path

from click.testing import CliRunner

from timeman.cli import cli


class TestNow:
    def test_default_format(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["now"])
        assert result.exit_code == 0, result.output
        assert re.fullmatch(
            r"\w{3}, \d{2} \w{3} \d{4} \d{2}:\d{2}:\d{2} [+-]\d{4}", result.stdout.strip()
        )

    def test_offset_and_format(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-f", "%z", "-o", "+05:30", "now"])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "+0530"

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "-o", "+00:00", "now"])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["ok"] is True
        assert payload["op"] == "now"
        assert payload["data"]["iso"].endswith("+00:00")

    def test_invalid_offset_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-o", "bogus", "now"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "ERROR: now" in result.stderr
        assert "+00:00" in result.stderr

    def test_invalid_format_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-f", "%Q", "now"])
        assert result.exit_code == 1
        assert "%Q" in result.stderr

    def test_verbose_error_shows_code(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "-o", "bogus", "now"])
        assert result.exit_code == 1
        assert "code: INVALID_OFFSET" in result.stderr
        assert "kind: OffsetError" in result.stderr

    def test_json_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "-o", "bogus", "now"])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["ok"] is False
        assert payload["error"]["code"] == "INVALID_OFFSET"

    def test_config_file_defaults(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "timeman.toml").write_text('[defaults]\nformat = "%z"\noffset = "-02:00"\n')
        result = cli_runner.invoke(cli, ["now"])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "-0200"

    def test_flags_beat_config_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "timeman.toml").write_text('[defaults]\nformat = "%z"\noffset = "-02:00"\n')
        result = cli_runner.invoke(cli, ["-o", "+01:00", "now"])
        assert result.stdout.strip() == "+0100"

    def test_explicit_config_option(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        custom = tmp_path / "elsewhere.toml"
        custom.write_text('[defaults]\nformat = "%z"\noffset = "+09:00"\n')
        result = cli_runner.invoke(cli, ["-c", str(custom), "now"])
        assert result.stdout.strip() == "+0900"

    def test_invalid_config_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "timeman.toml").write_text("[defaults\n")
        result = cli_runner.invoke(cli, ["now"])
        assert result.exit_code == 1
        assert "Invalid TOML" in result.stderr

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["now", "--examples"])
        assert result.exit_code == 0
        assert "timeman -o +00:00 now" in result.stdout
