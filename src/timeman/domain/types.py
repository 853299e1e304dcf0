"""Operation names shared by the service and output layers."""

from __future__ import annotations

from enum import StrEnum


class Operation(StrEnum):
    """Names reported in ``ServiceResult.op``; one per CLI command."""

    NOW = "now"
    SINCE = "since"
    SUB = "sub"
    SUB_DURATION = "sub-duration"
    ADD_DURATION = "add-duration"
    TRANSLATE = "translate"
    HELP_FORMAT = "help-format"
    HELP_DURATION = "help-duration"


# Operations whose result carries an encoded time-span.
SPAN_OPERATIONS = frozenset({Operation.SINCE, Operation.SUB})
