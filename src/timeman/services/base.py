"""BaseService: shared foundation for timeman services.

Every service receives the resolved :class:`TimemanSettings` and an
optional clock. The clock returns an aware "now" and is replaced by a
frozen one in tests.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timezone
from typing import TYPE_CHECKING

import structlog

from timeman.domain.dates import expand_format, local_offset, parse_offset
from timeman.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from timeman.config.settings import TimemanSettings
    from timeman.domain.errors import TimemanError

log = structlog.get_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class TimeService(BaseService):
            def now(self) -> ServiceResult:
                fmt = self._format()
                ...
    """

    def __init__(self, settings: TimemanSettings, clock: Clock | None = None) -> None:
        self._settings = settings
        self._clock = clock or utc_now

    def _format(self) -> str:
        """The effective date format, validated."""
        fmt = self._settings.effective_format
        expand_format(fmt)
        return fmt

    def _offset(self) -> timezone:
        """The effective UTC offset; the local offset when none is configured.

        Operations that do not use the offset still resolve it, so a bad
        global offset fails every date command.
        """
        raw = self._settings.effective_offset
        if raw is None:
            return local_offset(self._clock())
        return parse_offset(raw)

    def _failure(self, op: str, exc: TimemanError, *, code: str | None = None) -> ServiceResult:
        error = ServiceError.from_exception(exc, code=code)
        log.debug("service.failed", op=op, code=error.code, reason=error.message)
        return ServiceResult(ok=False, op=op, error=error)
