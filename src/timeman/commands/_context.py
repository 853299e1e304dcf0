"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Builds services on demand and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timeman.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from timeman.config.settings import TimemanSettings
    from timeman.services.base import Clock
    from timeman.services.dates import TimeService
    from timeman.services.help import HelpService
    from timeman.services.result import ServiceResult

# ServiceError.code -> process exit status. Unlisted codes exit 1.
EXIT_CODES: dict[str, int] = {
    "INVALID_OFFSET": 1,
    "INVALID_FORMAT": 1,
    "DATE_PARSE": 5,
    "MISSING_OFFSET": 6,
    "INVALID_DATE": 7,
    "INVALID_DURATION": 10,
    "INVALID_TO_FORMAT": 11,
    "OUT_OF_RANGE": 12,
}


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: TimemanSettings, clock: Clock | None = None) -> None:
        self.settings = settings
        self._clock = clock

        from timeman.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    @property
    def time(self) -> TimeService:
        from timeman.services.dates import TimeService

        return TimeService(self.settings, clock=self._clock)

    @property
    def help(self) -> HelpService:
        from timeman.services.help import HelpService

        return HelpService(self.settings, clock=self._clock)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout; warnings go to stderr (human mode only,
          JSON carries them in the payload).
        * Failure: writes to stderr and exits with the code mapped from
          ``result.error.code``.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output and not settings.quiet:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            code = result.error.code if result.error else ""
            raise SystemExit(EXIT_CODES.get(code, 1))
