"""Commands: reference for format directives and duration flags."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timeman.commands._base import TimeCommand

if TYPE_CHECKING:
    from timeman.commands._context import AppContext


@click.command(
    "help-format",
    cls=TimeCommand,
    examples="""\
  timeman help-format
  timeman help-format %T
  timeman help-format month""",
)
@click.argument("get_or_search", required=False)
@click.pass_obj
def help_format(app: AppContext, get_or_search: str | None) -> None:
    """List format directives, show one exactly, or search their descriptions."""
    app.emit(app.help.format_help(get_or_search))


@click.command("help-duration", cls=TimeCommand)
@click.pass_obj
def help_duration(app: AppContext) -> None:
    """Explain the duration flags accepted by since and sub."""
    app.emit(app.help.duration_help())
