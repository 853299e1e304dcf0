"""Domain exception hierarchy.

Domain functions raise these; the service layer converts them into
:class:`~timeman.services.result.ServiceError` payloads.
"""

from __future__ import annotations


class TimemanError(ValueError):
    """Base class for every error raised by the domain layer."""

    code = "INVALID_INPUT"


class DurationError(TimemanError):
    """A duration string or time-span could not be built."""

    code = "INVALID_DURATION"


class DurationDecodeError(DurationError):
    """Duration text is malformed (bad lead-in or unknown character)."""


class DurationRangeError(DurationError):
    """Nanosecond component outside ``0 <= n < 1_000_000_000``."""


class DateFormatError(TimemanError):
    """A format string contains an unknown or dangling directive."""

    code = "INVALID_FORMAT"


class OffsetError(TimemanError):
    """A UTC offset is not of the form ``+HH:MM``."""

    code = "INVALID_OFFSET"


class DateParseError(TimemanError):
    """Date text does not match the expected format."""

    code = "DATE_PARSE"


class InvalidDateError(DateParseError):
    """Date text matches the format but names an impossible date."""

    code = "INVALID_DATE"


class MissingOffsetError(DateParseError):
    """Date parsed without a UTC offset (format lacks ``%z``)."""

    code = "MISSING_OFFSET"
