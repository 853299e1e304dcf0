"""Commands: add or subtract an encoded duration from a date."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timeman.commands._base import TimeCommand

if TYPE_CHECKING:
    from timeman.commands._context import AppContext

# Durations such as "-PT5S" must reach the DURATION argument untouched.
_ACCEPT_DASHED = {"ignore_unknown_options": True}


@click.command(
    "sub-duration",
    cls=TimeCommand,
    aliases=("-d",),
    context_settings=_ACCEPT_DASHED,
    examples="""\
  timeman sub-duration "Mon, 22 Apr 2024 18:20:29 +0300" P1DT2H
  timeman -d "Mon, 22 Apr 2024 18:20:29 +0300" PT90S""",
)
@click.argument("from_date")
@click.argument("duration")
@click.pass_obj
def sub_duration(app: AppContext, from_date: str, duration: str) -> None:
    """Move FROM_DATE back by DURATION (see help-duration)."""
    app.emit(app.time.sub_duration(from_date, duration))


@click.command(
    "add-duration",
    cls=TimeCommand,
    aliases=("+d",),
    context_settings=_ACCEPT_DASHED,
    examples="""\
  timeman add-duration "Mon, 22 Apr 2024 18:20:29 +0300" P1W
  timeman +d "Mon, 22 Apr 2024 18:20:29 +0300" -PT1H""",
)
@click.argument("from_date")
@click.argument("duration")
@click.pass_obj
def add_duration(app: AppContext, from_date: str, duration: str) -> None:
    """Move FROM_DATE forward by DURATION (see help-duration)."""
    app.emit(app.time.add_duration(from_date, duration))
