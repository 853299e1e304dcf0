"""Commands: duration elapsed since a date, and between two dates."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timeman.commands._base import TimeCommand

if TYPE_CHECKING:
    from timeman.commands._context import AppContext

_pretty_option = click.option("-p", "--pretty", is_flag=True, help="Render the duration as a phrase.")


@click.command(
    cls=TimeCommand,
    aliases=("s",),
    examples="""\
  timeman since "Mon, 22 Apr 2024 18:20:29 +0300"
  timeman since "Mon, 22 Apr 2024 18:20:29 +0300" sn
  timeman -f "%F %T %z" since "2024-04-22 18:20:29 +0300"
  timeman s "Mon, 22 Apr 2024 18:20:29 +0300" YMDhms --pretty""",
)
@click.argument("date")
@click.argument("duration_flags", required=False)
@_pretty_option
@click.pass_obj
def since(app: AppContext, date: str, duration_flags: str | None, pretty: bool) -> None:
    """Time elapsed since DATE, encoded with DURATION_FLAGS (see help-duration)."""
    app.emit(app.time.since(date, duration_flags, pretty=pretty or None))


@click.command(
    cls=TimeCommand,
    aliases=("-",),
    examples="""\
  timeman sub "Tue, 23 Apr 2024 00:00:00 +0000" "Mon, 22 Apr 2024 00:00:00 +0000"
  timeman - "Tue, 23 Apr 2024 00:00:00 +0000" "Mon, 22 Apr 2024 00:00:00 +0000" Dh
  timeman -f "%F %z" sub "2024-05-01 +0000" "2024-04-01 +0000" D --pretty""",
)
@click.argument("from_date")
@click.argument("date")
@click.argument("duration_flags", required=False)
@_pretty_option
@click.pass_obj
def sub(
    app: AppContext,
    from_date: str,
    date: str,
    duration_flags: str | None,
    pretty: bool,
) -> None:
    """Duration of FROM_DATE minus DATE, encoded with DURATION_FLAGS."""
    app.emit(app.time.sub(from_date, date, duration_flags, pretty=pretty or None))
