"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ROMANCTL_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``romanctl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from romanctl.config.discovery import find_config, read_toml
from romanctl.config.models import ConvertConfig, OutputConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feed the sections of a ``romanctl.toml`` file to pydantic-settings."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is not None:
            try:
                self._data = read_toml(toml_path)
            except tomllib.TOMLDecodeError as exc:
                raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# pydantic-settings builds sources from a classmethod, so the discovered
# path travels through thread-local storage for the duration of __init__.
_tls = threading.local()


class RomanSettings(BaseSettings):
    """Frozen settings for one romanctl invocation.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        convert: ``[convert]`` section, handed to ``ConvertService``.
        output: ``[output]`` section, used by the Rich console.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ROMANCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    convert: ConvertConfig = Field(default_factory=ConvertConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

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
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        cwd: Path | None = None,
        **cli_flags: Any,
    ) -> RomanSettings:
        """Discover the config file and merge CLI flags on top of it."""
        toml_path = find_config(cwd, explicit=config_path)
        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
