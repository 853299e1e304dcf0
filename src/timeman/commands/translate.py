"""Command: re-render a date in another format or UTC offset."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timeman.commands._base import TimeCommand

if TYPE_CHECKING:
    from timeman.commands._context import AppContext


@click.command(
    cls=TimeCommand,
    aliases=("t",),
    examples="""\
  timeman translate "Mon, 22 Apr 2024 18:20:29 +0300" -F "%F %T %z"
  timeman t "Mon, 22 Apr 2024 18:20:29 +0300" -O +00:00
  timeman -f "%+" t "2024-04-22T18:20:29.306665+03:00" -F %T -O -05:00""",
)
@click.argument("date")
@click.option("-F", "--to-format", default=None, help="Output format (see help-format).")
@click.option("-O", "--to-offset", "offset", default=None, help="Output UTC offset, e.g. +00:00.")
@click.pass_obj
def translate(app: AppContext, date: str, to_format: str | None, offset: str | None) -> None:
    """Parse DATE with the global format and print it in another format or offset."""
    app.emit(app.time.translate(date, to_format=to_format, offset=offset))
