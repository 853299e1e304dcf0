"""HelpService: format-directive lookup and duration flag reference."""

from __future__ import annotations

from timeman.domain.dates import DIRECTIVES, find_directives, get_directive, summary
from timeman.domain.types import Operation
from timeman.services.base import BaseService
from timeman.services.result import ServiceResult

DURATION_HELP = """\
This is only for the content of the duration
Valid flags are:
Y : Year
M : Month
D : Day
h : Hour
m : Minute
s : Second
n : Nanosecond

They are used like:
"YMDhmsn" this means that everything is included in duration
"sn" this means only the seconds and nanoseconds are included but everything is stored in seconds and nanoseconds

Without flags every unit is used, weeks included.
Years are 365 days and months are a twelfth of a year.

The recommended duration flags are "sn".
"""


class HelpService(BaseService):
    """Reference text for ``help-format`` and ``help-duration``."""

    def format_help(self, get_or_search: str | None = None) -> ServiceResult:
        """Look up one directive exactly, else search descriptions, else list all.

        An exact hit carries the full description; listings carry the first
        line of each description only.
        """
        op = Operation.HELP_FORMAT

        if get_or_search is None:
            matches = dict(sorted(DIRECTIVES.items()))
            mode = "all"
        else:
            key = get_or_search.strip()
            description = get_directive(key)
            if description is not None:
                return ServiceResult(
                    ok=True,
                    op=op,
                    data={
                        "mode": "exact",
                        "query": key,
                        "items": [{"directive": key, "description": description}],
                    },
                )
            matches = find_directives(key)
            mode = "search"

        warnings: list[str] = []
        if not matches:
            warnings.append(f"No directive matches {get_or_search!r}")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "mode": mode,
                "query": get_or_search,
                "items": [
                    {"directive": key, "description": summary(description)}
                    for key, description in matches.items()
                ],
            },
            warnings=warnings,
        )

    def duration_help(self) -> ServiceResult:
        return ServiceResult(ok=True, op=Operation.HELP_DURATION, data={"text": DURATION_HELP})
