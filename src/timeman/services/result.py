"""ServiceResult and ServiceError: the contract between services and the CLI.

INVARIANT: All service-layer methods return ServiceResult. Domain errors
never escape a service; they become a ServiceError whose ``code`` selects
the process exit code.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from timeman.domain.errors import TimemanError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: TimemanError, *, code: str | None = None) -> ServiceError:
        """Build an error from a domain exception, optionally overriding its code."""
        return cls(
            code=code or exc.code,
            message=str(exc),
            detail={"kind": type(exc).__name__},
        )


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"since"``).
        data: Operation-specific payload on success. Value-producing
            operations put the printable value under ``"text"``.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (resolved format, offset, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
