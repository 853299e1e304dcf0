"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, timeman.toml only holds
overrides, e.g.::

    [defaults]
    format = "%F %T %z"
    duration_flags = "sn"
"""

from __future__ import annotations

from pydantic import BaseModel

from timeman.domain.dates import DEFAULT_FORMAT


class DefaultsConfig(BaseModel):
    """[defaults] section: fallbacks used when a flag is not given."""

    model_config = {"frozen": True}

    format: str = DEFAULT_FORMAT
    offset: str | None = None
    duration_flags: str | None = None
    pretty: bool = False
