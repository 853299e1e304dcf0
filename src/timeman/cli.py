"""Root CLI group for timeman with global flags and command registration."""

from __future__ import annotations

import click

from timeman import __version__
from timeman.commands import register_commands
from timeman.commands._base import TimeGroup
from timeman.commands._context import AppContext
from timeman.config.settings import TimemanSettings


# ignore_unknown_options lets dash-prefixed aliases ("-", "-d") reach
# command resolution instead of failing as unknown root options.
@click.group(
    cls=TimeGroup,
    invoke_without_command=True,
    context_settings={"ignore_unknown_options": True},
)
@click.version_option(version=__version__, prog_name="timeman")
@click.option(
    "-f",
    "--format",
    "date_format",
    default=None,
    help='Date format [default: "%a, %d %b %Y %T %z"], see help-format.',
)
@click.option("-o", "--offset", "utc_offset", default=None, help="UTC offset, e.g. +03:00.")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Bare values only, no warnings.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    date_format: str | None,
    utc_offset: str | None,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """timeman: a simple date and time manipulator.

    Get the time, how much time elapsed since a date, the duration between
    two dates, add or subtract a duration from a date, and translate a date
    between formats and UTC offsets.
    """
    settings = TimemanSettings.from_cli(
        config_path=config_path,
        format=date_format,
        utc_offset=utc_offset,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
