"""Duration encoding: field masks, time-spans, and the ``P..T..S`` codec.

A time-span is rendered as ``[-]P[nY][nM][nW][nD][T[nH][nM][n[.f]S]]``.
Years and months are fixed-length approximations (365 days, 1/12 of that),
not calendar arithmetic.

INVARIANT: ``decode(encode(span, FieldMask.all()))`` reconstructs *span*.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import timedelta

from timeman.domain.errors import DurationDecodeError, DurationRangeError

NANOS_PER_SECOND = 1_000_000_000

YEAR_SECONDS = 31_536_000
MONTH_SECONDS = YEAR_SECONDS // 12
WEEK_SECONDS = 604_800
DAY_SECONDS = 86_400
HOUR_SECONDS = 3_600
MINUTE_SECONDS = 60

_DIGITS = frozenset("0123456789")


class FieldMask(enum.Flag):
    """Units that participate in encoding a time-span."""

    YEAR = enum.auto()
    MONTH = enum.auto()
    WEEK = enum.auto()
    DAY = enum.auto()
    HOUR = enum.auto()
    MINUTE = enum.auto()
    SECOND = enum.auto()
    NANOS = enum.auto()

    @classmethod
    def empty(cls) -> FieldMask:
        return cls(0)

    @classmethod
    def all(cls) -> FieldMask:
        mask = cls.empty()
        for member in cls:
            mask |= member
        return mask

    @classmethod
    def default(cls) -> FieldMask:
        return cls.SECOND | cls.NANOS

    @classmethod
    def from_letters(cls, text: str) -> FieldMask:
        """Build a mask from flag letters such as ``"YMDhmsn"``.

        Unrecognised characters are ignored. No letter selects WEEK; weeks
        are only reachable through :meth:`all`.
        """
        mask = cls.empty()
        for char in text:
            bit = _LETTER_BITS.get(char)
            if bit is not None:
                mask |= bit
        return mask

    def letters(self) -> str:
        """Render the mask back to flag letters (WEEK has none)."""
        return "".join(letter for letter, bit in _LETTER_BITS.items() if bit in self)


_LETTER_BITS: dict[str, FieldMask] = {
    "Y": FieldMask.YEAR,
    "M": FieldMask.MONTH,
    "D": FieldMask.DAY,
    "h": FieldMask.HOUR,
    "m": FieldMask.MINUTE,
    "s": FieldMask.SECOND,
    "n": FieldMask.NANOS,
}

_DATE_UNITS: tuple[tuple[FieldMask, str, int], ...] = (
    (FieldMask.YEAR, "Y", YEAR_SECONDS),
    (FieldMask.MONTH, "M", MONTH_SECONDS),
    (FieldMask.WEEK, "W", WEEK_SECONDS),
    (FieldMask.DAY, "D", DAY_SECONDS),
)

_TIME_UNITS: tuple[tuple[FieldMask, str, int], ...] = (
    (FieldMask.HOUR, "H", HOUR_SECONDS),
    (FieldMask.MINUTE, "M", MINUTE_SECONDS),
)

_TIME_BITS = FieldMask.HOUR | FieldMask.MINUTE | FieldMask.SECOND

# Unit letters whose length does not depend on the T marker.
_FIXED_LENGTHS: dict[str, int] = {
    "Y": YEAR_SECONDS,
    "W": WEEK_SECONDS,
    "D": DAY_SECONDS,
    "H": HOUR_SECONDS,
}

_UNIT_NAMES: dict[str, str] = {
    "Y": "Year",
    "W": "Week",
    "D": "Day",
    "H": "Hour",
    "S": "Second",
}


mask_from_letters = FieldMask.from_letters


@dataclass(frozen=True)
class TimeSpan:
    """Signed whole seconds plus an unsigned nanosecond remainder.

    The sign of the whole span is carried by ``seconds``; ``nanoseconds``
    is always a magnitude in ``[0, 1_000_000_000)``.
    """

    seconds: int = 0
    nanoseconds: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.nanoseconds < NANOS_PER_SECOND:
            msg = f"Nanoseconds must be in [0, {NANOS_PER_SECOND}), got {self.nanoseconds}"
            raise DurationRangeError(msg)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> TimeSpan:
        """Split a ``timedelta`` into seconds (truncated toward zero) and remainder."""
        micros = delta // timedelta(microseconds=1)
        whole, frac = divmod(abs(micros), 1_000_000)
        return cls(-whole if micros < 0 else whole, frac * 1_000)

    def to_timedelta(self) -> timedelta:
        """Convert to a ``timedelta``; sub-microsecond nanoseconds are dropped."""
        magnitude = timedelta(seconds=abs(self.seconds), microseconds=self.nanoseconds // 1_000)
        return -magnitude if self.seconds < 0 else magnitude

    @property
    def is_negative(self) -> bool:
        return self.seconds < 0


def encode(span: TimeSpan, mask: FieldMask | None = None) -> str:
    """Encode *span* as a duration string restricted to the units in *mask*.

    Units are emitted largest first and skipped when their count is zero.
    ``T`` is written whenever any of HOUR, MINUTE or SECOND is selected, even
    if nothing follows it. Seconds are always written when SECOND is
    selected; the fraction is appended as a raw integer when NANOS is also
    selected and the remainder is non-zero.
    """
    if mask is None:
        mask = FieldMask.default()

    parts: list[str] = []
    if span.is_negative:
        parts.append("-")
    parts.append("P")

    remaining = abs(span.seconds)
    for bit, letter, length in _DATE_UNITS:
        if bit in mask:
            count, rest = divmod(remaining, length)
            if count > 0:
                remaining = rest
                parts.append(f"{count}{letter}")

    if mask & _TIME_BITS:
        parts.append("T")

    for bit, letter, length in _TIME_UNITS:
        if bit in mask:
            count, rest = divmod(remaining, length)
            if count > 0:
                remaining = rest
                parts.append(f"{count}{letter}")

    if FieldMask.SECOND in mask:
        if span.nanoseconds and FieldMask.NANOS in mask:
            parts.append(f"{remaining}.{span.nanoseconds}S")
        else:
            parts.append(f"{remaining}S")

    return "".join(parts)


def decode(text: str) -> TimeSpan:
    """Parse a duration string produced by :func:`encode`.

    Digits after a ``.`` are taken as a nanosecond count as written; they are
    not scaled by the number of digits (``PT1.5S`` is 1 s and 5 ns).

    Raises:
        DurationDecodeError: The text does not start with ``P`` or ``-P``, or
            contains a character that is neither a digit, ``.``, ``T`` nor a
            unit letter.
        DurationRangeError: The nanosecond total reaches one second.
    """
    chars = iter(text)
    sign = 1
    for char in chars:
        if char == "-":
            sign = -1
        elif char == "P":
            break
        else:
            raise DurationDecodeError(f"Duration must start with 'P' or '-P': {text!r}")
    else:
        raise DurationDecodeError(f"Duration is missing the 'P' designator: {text!r}")

    seconds = 0
    nanos = 0
    whole = 0
    fraction = 0
    in_fraction = False
    in_time = False

    for char in chars:
        if char in _DIGITS:
            if in_fraction:
                fraction = fraction * 10 + int(char)
            else:
                whole = whole * 10 + int(char)
        elif char == ".":
            in_fraction = True
        elif char == "T":
            whole = 0
            in_time = True
        elif char in _FIXED_LENGTHS:
            seconds += whole * _FIXED_LENGTHS[char]
            whole = 0
        elif char == "M":
            seconds += whole * (MINUTE_SECONDS if in_time else MONTH_SECONDS)
            whole = 0
        elif char == "S":
            seconds += whole
            nanos += fraction
        else:
            raise DurationDecodeError(f"Unexpected character {char!r} in duration {text!r}")

    return TimeSpan(seconds * sign, nanos)


def prettify(text: str) -> str:
    """Render an encoded duration as a phrase, e.g. ``"1 Hour, 2 Minutes, "``.

    Counts above one are pluralised. Every unit fragment ends with ``", "``;
    a fractional remainder after the seconds is appended as
    ``"<n> Nanoseconds"``. Characters outside the duration alphabet are
    skipped.
    """
    out: list[str] = []
    whole = 0
    fraction = 0
    in_fraction = False
    in_time = False

    for char in text:
        plural = "s" if whole > 1 else ""
        if char in _DIGITS:
            if in_fraction:
                fraction = fraction * 10 + int(char)
            else:
                whole = whole * 10 + int(char)
        elif char == ".":
            in_fraction = True
        elif char == "-":
            out.append("-")
        elif char == "T":
            in_time = True
        elif char == "M":
            name = "Minute" if in_time else "Month"
            out.append(f"{whole} {name}{plural}, ")
            whole = 0
        elif char == "S":
            out.append(f"{whole} Second{plural}, ")
            if fraction > 0:
                out.append(f"{fraction} Nanoseconds")
        elif char in _UNIT_NAMES:
            out.append(f"{whole} {_UNIT_NAMES[char]}{plural}, ")
            whole = 0

    return "".join(out)
