"""Date format directives, offsets, and date parsing over ``datetime``.

Format strings accept the ``datetime`` primitives plus a handful of
composite shorthands (``%T``, ``%F``, ...) that are expanded before
``strptime``/``strftime`` see them. Every directive is validated against
:data:`DIRECTIVES`, which doubles as the ``help-format`` table.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime, timezone

from timeman.domain.errors import (
    DateFormatError,
    DateParseError,
    InvalidDateError,
    MissingOffsetError,
    OffsetError,
)

DEFAULT_FORMAT = "%a, %d %b %Y %T %z"

DIRECTIVES: dict[str, str] = {
    "%A": (
        "Full day of the week names.\n\n"
        "Prints a full name in the title case, reads either a short or full name in any case."
    ),
    "%B": (
        "Full month names.\n\n"
        "Prints a full name in the title case, reads either a short or full name in any case."
    ),
    "%D": 'Date in format: 04/22/24\n\nSame as format: "%m/%d/%y"',
    "%F": 'Date in format: 2024-04-22\n\nSame as format: "%Y-%m-%d"',
    "%G": "ISO year like: 2024\n\nOnly parses together with %V and %u.",
    "%H": "Hour 00-23 zero pad like: 06",
    "%I": "Hour 01-12 zero pad like: 06",
    "%M": "Minute 00-59 zero pad like: 07",
    "%R": 'Hour 0-24 and minute like: 17:00\n\nSame as format: "%H:%M"',
    "%S": "Second 00-59 zero pad like: 06",
    "%T": 'Time like: 17:46:05\n\nSame as format: "%H:%M:%S"',
    "%U": "Week of the year, Sunday first, like: 16",
    "%V": "ISO week of the year like: 17",
    "%W": "Week of the year, Monday first, like: 16",
    "%Y": "Year like: 2024",
    "%Z": (
        "Time zone name like: UTC, don't use!\n\n"
        'Only UTC, GMT and the local zone names parse, use "%z"'
    ),
    "%a": "Short name of the day of the week, is 3 letters",
    "%b": "Short name of month",
    "%d": "Day of the month zero pad like: 07",
    "%f": "Microseconds zero pad like: 000007",
    "%h": 'Short name of month\n\nSame as format: "%b"',
    "%j": "Day of the year zero pad like: 013",
    "%m": "Month zero pad like: 04",
    "%n": 'New line like "\\n"',
    "%p": "AM/PM",
    "%t": "Tab like: \\t",
    "%u": "Day of the week, where Monday = 1 and Sunday = 7 like: 1",
    "%v": 'Date like: 22-Apr-2024\n\nSame as format: "%d-%b-%Y"',
    "%w": "Day of the week, where Sunday = 0 and Saturday = 6 like: 1",
    "%y": "Year mod 100 like: 24",
    "%z": (
        "Timezone offset like: +0300\n\n"
        'Reads "+03:00", "+0300" and "Z". Dates need it to be parsed.'
    ),
    "%+": (
        "Date and time like: 2024-04-22T18:20:29.306665+0300\n\n"
        'Same as format: "%Y-%m-%dT%H:%M:%S.%f%z"'
    ),
    "%%": "% like: %",
}

_COMPOSITES: dict[str, str] = {
    "%D": "%m/%d/%y",
    "%F": "%Y-%m-%d",
    "%R": "%H:%M",
    "%T": "%H:%M:%S",
    "%h": "%b",
    "%n": "\n",
    "%t": "\t",
    "%v": "%d-%b-%Y",
    "%+": "%Y-%m-%dT%H:%M:%S.%f%z",
}

_DIRECTIVE_RE = re.compile(r"%(.?)", re.DOTALL)

_MISMATCH_PREFIXES = ("time data", "unconverted data")


def _expand_directive(match: re.Match[str]) -> str:
    key = match.group(0)
    if key == "%":
        raise DateFormatError("Format ends with a dangling '%'")
    if key not in DIRECTIVES:
        raise DateFormatError(f"Unknown format directive {key!r}, run command `help-format`")
    return _COMPOSITES.get(key, key)


def expand_format(fmt: str) -> str:
    """Validate *fmt* and replace composite directives with primitives."""
    return _DIRECTIVE_RE.sub(_expand_directive, fmt)


def parse_offset(text: str) -> timezone:
    """Parse a fixed UTC offset such as ``+03:00``, ``-0530`` or ``Z``."""
    try:
        parsed = datetime.strptime(text.strip(), "%z")
    except ValueError as exc:
        raise OffsetError(f'The offset should look like "+00:00", got {text!r}') from exc
    assert isinstance(parsed.tzinfo, timezone)
    return parsed.tzinfo


def local_offset(now: datetime | None = None) -> timezone:
    """Return the local UTC offset in effect at *now* (default: current time)."""
    moment = now or datetime.now(UTC)
    offset = moment.astimezone().utcoffset()
    assert offset is not None
    return timezone(offset)


def parse_date(text: str, fmt: str, field: str = "date") -> datetime:
    """Parse *text* with *fmt* into an offset-aware datetime.

    Raises:
        DateFormatError: *fmt* holds an unknown directive.
        DateParseError: *text* does not match *fmt*.
        InvalidDateError: *text* matches but is not a real date.
        MissingOffsetError: *fmt* produced no UTC offset.
    """
    pattern = expand_format(fmt)
    try:
        parsed = datetime.strptime(text, pattern)
    except ValueError as exc:
        message = str(exc)
        if message.startswith(_MISMATCH_PREFIXES):
            msg = f"Cannot parse `{field}`, the date should be in this format: `{fmt}`"
            raise DateParseError(msg) from exc
        raise InvalidDateError(f"`{field}` has an invalid date: {message}") from exc
    if parsed.tzinfo is None:
        msg = f"Cannot parse the UTC offset for `{field}`, the format needs `%z` in it"
        raise MissingOffsetError(msg)
    return parsed


def format_date(value: datetime, fmt: str) -> str:
    return value.strftime(expand_format(fmt))


def summary(description: str) -> str:
    """First line of a directive description."""
    return description.splitlines()[0] if description else ""


def get_directive(key: str) -> str | None:
    return DIRECTIVES.get(key.strip())


def find_directives(term: str) -> dict[str, str]:
    """Directives whose description contains *term* (case-insensitive), sorted by key."""
    needle = term.strip().lower()
    return {
        key: description
        for key, description in sorted(DIRECTIVES.items())
        if needle in description.lower()
    }
