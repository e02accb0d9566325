"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``DOMAINCTL_*`` prefix
  3. TOML file    — ``domainctl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`domainctl.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from domainctl.config.discovery import find_config
from domainctl.config.models import (
    BrowseConfig,
    CatalogConfig,
    ClipboardConfig,
    FeedbackConfig,
)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``domainctl.toml`` file discovered via walk-up."""

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
            self._resolve_catalog_path(toml_path.parent)

    def _resolve_catalog_path(self, base: Path) -> None:
        """Relative ``[catalog] path`` values are relative to the TOML file."""
        section = self._data.get("catalog")
        if isinstance(section, dict) and isinstance(section.get("path"), str):
            path = Path(section["path"]).expanduser()
            if not path.is_absolute():
                path = base / path
            self._data["catalog"] = {**section, "path": path}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class DomainSettings(BaseSettings):
    """Unified settings for the domainctl CLI.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.  Stored on the
    :class:`~domainctl.commands._context.AppContext` at the CLI root.

    Attributes:
        config_path: The TOML file in effect, or None when none was found.
        catalog_override: ``--catalog`` flag; wins over ``[catalog] path``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DOMAINCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    catalog_override: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_interact: bool = False

    # --- TOML sections ---
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    clipboard: ClipboardConfig = Field(default_factory=ClipboardConfig)
    feedback: FeedbackConfig = Field(default_factory=FeedbackConfig)
    browse: BrowseConfig = Field(default_factory=BrowseConfig)

    @property
    def catalog_path(self) -> Path | None:
        """Catalog file to load; None means the bundled catalog."""
        return self.catalog_override or self.catalog.path

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
        start_dir: Path | None = None,
        **cli_flags: Any,
    ) -> DomainSettings:
        """Construct settings from CLI invocation.

        Discovers ``domainctl.toml`` via walk-up from *start_dir* (or uses
        the explicit *config_path*) and merges CLI flags as highest-priority
        overrides. ``None`` flag values are dropped so they never mask
        lower-priority sources.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start_dir)

        flags = {k: v for k, v in cli_flags.items() if v is not None}

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None
