"""Tests for the root CLI group: help, version, aliases."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from timeman import __version__
from timeman.cli import cli

COMMANDS = [
    "now",
    "since",
    "sub",
    "sub-duration",
    "add-duration",
    "translate",
    "help-format",
    "help-duration",
]


class TestRoot:
    def test_no_command_prints_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Usage:" in result.stdout
        for name in COMMANDS:
            assert name in result.stdout

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_unknown_command(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["tomorrow"])
        assert result.exit_code == 2
        assert "No such command" in result.stderr

    @pytest.mark.parametrize("name", COMMANDS)
    def test_command_help(self, cli_runner: CliRunner, name: str) -> None:
        result = cli_runner.invoke(cli, [name, "--help"])
        assert result.exit_code == 0, result.output
        assert "Usage:" in result.stdout


class TestAliases:
    @pytest.mark.parametrize(
        "alias,canonical",
        [
            ("s", "since"),
            ("-", "sub"),
            ("-d", "sub-duration"),
            ("+d", "add-duration"),
            ("t", "translate"),
        ],
    )
    def test_alias_resolves_to_command(self, alias: str, canonical: str) -> None:
        import click

        ctx = click.Context(cli)
        command = cli.get_command(ctx, alias)
        assert command is not None
        assert command.name == canonical

    def test_resolve_command_reports_canonical_name(self) -> None:
        import click

        ctx = click.Context(cli)
        name, command, rest = cli.resolve_command(ctx, ["+d", "x", "P1D"])
        assert name == "add-duration"
        assert command is not None
        assert rest == ["x", "P1D"]

    def test_alias_in_short_help(self) -> None:
        import click

        command = cli.get_command(click.Context(cli), "since")
        assert command is not None
        assert command.short_help is not None
        assert "(alias: s)" in command.short_help
