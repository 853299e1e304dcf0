"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click (``None`` means "not given")
  2. Env vars: ``TIMEMAN_*`` prefix, ``__`` for nested sections
  3. TOML file: ``timeman.toml`` discovered via walk-up
  4. Code defaults: baked into :class:`DefaultsConfig`
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from timeman.config.discovery import find_config
from timeman.config.models import DefaultsConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``timeman.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class TimemanSettings(BaseSettings):
    """Settings for one timeman invocation.

    Stored on the :class:`~timeman.commands._context.AppContext` created by
    the root CLI group.

    Attributes:
        format: ``-f`` override of the date format.
        utc_offset: ``-o`` override of the UTC offset.
        defaults: ``[defaults]`` section used when no override is given.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TIMEMAN_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    format: str | None = None
    utc_offset: str | None = None
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)

    @property
    def effective_format(self) -> str:
        return self.format or self.defaults.format

    @property
    def effective_offset(self) -> str | None:
        return self.utc_offset or self.defaults.offset

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> TimemanSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path* when given, otherwise discovers
        ``timeman.toml`` walking up from *start*. Flags left at ``None``
        do not override lower-priority sources.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        overrides = {key: value for key, value in cli_flags.items() if value is not None}

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None
