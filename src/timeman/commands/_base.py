"""Custom Click base classes with --examples and alias support.

TimeCommand accepts ``examples`` (printed by an eager ``--examples`` flag)
and ``aliases`` (short names such as ``s`` or ``+d``). TimeGroup resolves
aliases to their command and reports the canonical name.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class TimeCommand(click.Command):
    """Click Command subclass with ``--examples`` and aliases."""

    def __init__(
        self,
        *args: Any,
        examples: str | None = None,
        aliases: tuple[str, ...] = (),
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.aliases = aliases
        if examples:
            _add_examples_option(self, examples)
        if aliases and self.short_help is None:
            summary = self.get_short_help_str(limit=60)
            self.short_help = f"{summary} (alias: {', '.join(aliases)})"


class TimeGroup(click.Group):
    """Click Group that resolves command aliases.

    Sets ``command_class = TimeCommand`` so subcommands accept ``examples``
    and ``aliases`` without an explicit ``cls=``.
    """

    command_class = TimeCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        command = super().get_command(ctx, cmd_name)
        if command is not None:
            return command
        for candidate in self.commands.values():
            if cmd_name in getattr(candidate, "aliases", ()):
                return candidate
        return None

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        _name, command, rest = super().resolve_command(ctx, args)
        return (command.name if command else None), command, rest
