"""TimeService: current time, elapsed time, date differences and shifts.

Pipeline per operation: RESOLVE (format, offset) -> PARSE -> COMPUTE ->
ENCODE/FORMAT -> REPORT.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

import structlog

from timeman.domain.dates import expand_format, format_date, parse_date, parse_offset
from timeman.domain.duration import FieldMask, TimeSpan, decode, encode, prettify
from timeman.domain.errors import DateFormatError, TimemanError
from timeman.domain.types import Operation
from timeman.services.base import BaseService
from timeman.services.result import ServiceError, ServiceResult

log = structlog.get_logger(__name__)


class TimeService(BaseService):
    """Date/time operations behind the ``now``, ``since``, ``sub``,
    ``add-duration``, ``sub-duration`` and ``translate`` commands."""

    # ── Now ──────────────────────────────────────────────────────────

    def now(self) -> ServiceResult:
        """Current time in the effective offset and format."""
        op = Operation.NOW
        try:
            fmt = self._format()
            moment = self._clock().astimezone(self._offset())
        except TimemanError as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"text": format_date(moment, fmt), "iso": moment.isoformat()},
            meta={"format": fmt},
        )

    # ── Durations between dates ──────────────────────────────────────

    def since(
        self,
        date: str,
        duration_flags: str | None = None,
        *,
        pretty: bool | None = None,
    ) -> ServiceResult:
        """Time elapsed from *date* until now."""
        op = Operation.SINCE
        try:
            fmt = self._format()
            start = parse_date(date, fmt, "date")
            now = self._clock().astimezone(self._offset())
        except TimemanError as exc:
            return self._failure(op, exc)
        return self._span_result(op, now - start, duration_flags, pretty)

    def sub(
        self,
        from_date: str,
        date: str,
        duration_flags: str | None = None,
        *,
        pretty: bool | None = None,
    ) -> ServiceResult:
        """Duration of ``from_date - date``."""
        op = Operation.SUB
        try:
            fmt = self._format()
            self._offset()
            minuend = parse_date(from_date, fmt, "from_date")
            subtrahend = parse_date(date, fmt, "date")
        except TimemanError as exc:
            return self._failure(op, exc)
        return self._span_result(op, minuend - subtrahend, duration_flags, pretty)

    def _mask(self, duration_flags: str | None) -> FieldMask:
        flags = duration_flags if duration_flags is not None else self._settings.defaults.duration_flags
        if flags is None:
            return FieldMask.all()
        return FieldMask.from_letters(flags)

    def _span_result(
        self,
        op: str,
        delta: timedelta,
        duration_flags: str | None,
        pretty: bool | None,
    ) -> ServiceResult:
        mask = self._mask(duration_flags)
        span = TimeSpan.from_timedelta(delta)
        encoded = encode(span, mask)
        if pretty is None:
            pretty = self._settings.defaults.pretty
        log.debug("duration.encoded", op=op, encoded=encoded, units=mask.letters())

        warnings: list[str] = []
        if not mask:
            warnings.append("No duration flags selected, run command `help-duration`")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "text": prettify(encoded) if pretty else encoded,
                "encoded": encoded,
                "seconds": span.seconds,
                "nanoseconds": span.nanoseconds,
                "units": [member.name for member in mask],
            },
            warnings=warnings,
        )

    # ── Shifting a date by a duration ────────────────────────────────

    def add_duration(self, from_date: str, duration: str) -> ServiceResult:
        """*from_date* moved forward by the decoded *duration*."""
        return self._shift(Operation.ADD_DURATION, from_date, duration, forward=True)

    def sub_duration(self, from_date: str, duration: str) -> ServiceResult:
        """*from_date* moved backward by the decoded *duration*."""
        return self._shift(Operation.SUB_DURATION, from_date, duration, forward=False)

    def _shift(self, op: str, from_date: str, duration: str, *, forward: bool) -> ServiceResult:
        try:
            fmt = self._format()
            self._offset()
            start = parse_date(from_date, fmt, "from_date")
            span = decode(duration)
            log.debug("duration.decoded", op=op, seconds=span.seconds, nanoseconds=span.nanoseconds)
            delta = span.to_timedelta()
            moved = start + delta if forward else start - delta
        except TimemanError as exc:
            return self._failure(op, exc)
        except OverflowError as exc:
            return self._out_of_range(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data=self._date_payload(moved, fmt),
            meta={"duration": duration, "seconds": span.seconds, "nanoseconds": span.nanoseconds},
        )

    # ── Translate ────────────────────────────────────────────────────

    def translate(
        self,
        date: str,
        to_format: str | None = None,
        offset: str | None = None,
    ) -> ServiceResult:
        """Re-render *date* with *to_format* and/or in another UTC *offset*.

        Without *offset* the date keeps the offset it was parsed with.
        """
        op = Operation.TRANSLATE
        try:
            fmt = self._format()
            self._offset()
            value = parse_date(date, fmt, "date")
            if to_format is not None:
                try:
                    expand_format(to_format)
                except DateFormatError as exc:
                    return self._failure(op, exc, code="INVALID_TO_FORMAT")
                fmt = to_format
            if offset is not None:
                value = value.astimezone(parse_offset(offset))
        except TimemanError as exc:
            return self._failure(op, exc)
        except OverflowError as exc:
            return self._out_of_range(op, exc)

        return ServiceResult(ok=True, op=op, data=self._date_payload(value, fmt))

    # ── Helpers ──────────────────────────────────────────────────────

    @staticmethod
    def _date_payload(value: datetime, fmt: str) -> dict[str, Any]:
        return {"text": format_date(value, fmt), "iso": value.isoformat()}

    @staticmethod
    def _out_of_range(op: str, exc: OverflowError) -> ServiceResult:
        log.debug("service.failed", op=op, code="OUT_OF_RANGE", reason=str(exc))
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code="OUT_OF_RANGE", message=f"Date out of range: {exc}"),
        )
