"""Command: print the current time."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timeman.commands._base import TimeCommand

if TYPE_CHECKING:
    from timeman.commands._context import AppContext


@click.command(
    cls=TimeCommand,
    examples="""\
  timeman now
  timeman -o +00:00 now
  timeman -f "%F %T" -o -05:00 now
  timeman --json now""",
)
@click.pass_obj
def now(app: AppContext) -> None:
    """Print the current time; set the offset with the global -o option."""
    app.emit(app.time.now())
