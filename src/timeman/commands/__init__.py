"""Subcommand modules for timeman.

Provides register_commands() which uses deferred imports to keep
``timeman --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every subcommand on the root CLI group."""
    from timeman.commands.help_cmd import help_duration, help_format
    from timeman.commands.now import now
    from timeman.commands.shift import add_duration, sub_duration
    from timeman.commands.since import since, sub
    from timeman.commands.translate import translate

    cli.add_command(now)
    cli.add_command(since)
    cli.add_command(sub)
    cli.add_command(sub_duration)
    cli.add_command(add_duration)
    cli.add_command(translate)
    cli.add_command(help_format)
    cli.add_command(help_duration)
