"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``SEQTOOLS_*`` prefix (``SEQTOOLS_PARSE__SEPARATOR=;``)
  3. TOML file: ``seqtools.toml`` discovered via walk-up, or ``--config``
  4. Code defaults: baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from seqtools.config.discovery import find_config
from seqtools.config.models import OutputConfig, ParseConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``seqtools.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for the TOML path during construction.
_tls = threading.local()


class SeqSettings(BaseSettings):
    """Settings for the seqtools CLI, frozen after construction.

    Stored on the :class:`~seqtools.commands._context.AppContext` that
    flows through ``click.Context.obj``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SEQTOOLS_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    parse: ParseConfig = Field(default_factory=ParseConfig)
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
        element_type: str | None = None,
        **cli_flags: Any,
    ) -> SeqSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path* when it names a file, otherwise
        discovers ``seqtools.toml`` via walk-up. A ``--type`` flag overrides
        only ``parse.element_type``; the rest of ``[parse]`` still comes
        from env vars or the TOML file.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config()

        _tls.toml_path = toml_path
        try:
            settings = cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None

        if element_type is not None:
            parse = settings.parse.model_copy(update={"element_type": element_type})
            settings = settings.model_copy(update={"parse": parse})
        return settings
