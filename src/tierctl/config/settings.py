"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``TIERCTL_*`` prefix
  3. TOML file    — ``tierctl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`tierctl.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from tierctl.config.discovery import find_config, find_workspace_root
from tierctl.config.models import BoardConfig, ImagesConfig, StorageConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``tierctl.toml`` file discovered via walk-up."""

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
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class TierSettings(BaseSettings):
    """Unified settings for the entire tierctl CLI.

    Stored on the :class:`~tierctl.commands._context.AppContext` created by
    the root CLI group.

    Attributes:
        workspace_root: Directory holding the ``.tierctl`` storage slot
            (parent of ``tierctl.toml``, or CWD if no config found).
        config_path: The config file in effect, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TIERCTL_",
        "env_nested_delimiter": "__",
    }

    # --- Resolved path (not in TOML, derived from config location) ---
    workspace_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_interact: bool = False

    # --- TOML sections ---
    board: BoardConfig = Field(default_factory=BoardConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    images: ImagesConfig = Field(default_factory=ImagesConfig)

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
        workspace_root: Path | None = None,
        **cli_flags: Any,
    ) -> TierSettings:
        """Construct settings from CLI invocation.

        Discovers ``tierctl.toml`` via walk-up (or explicit *config_path*),
        resolves *workspace_root* from the config file's parent directory
        or the nearest ``.tierctl/`` directory, and merges CLI flags as
        highest-priority overrides.
        """
        toml_path: Path | None = None
        if config_path:
            toml_path = Path(config_path)
            if not toml_path.is_file():
                import click

                raise click.ClickException(f"Config file not found: {config_path}")
        else:
            toml_path = find_config(workspace_root)

        resolved_root = workspace_root
        if resolved_root is None:
            if toml_path is not None:
                resolved_root = toml_path.parent
            else:
                resolved_root = find_workspace_root() or Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(
                workspace_root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None

    @property
    def storage_dir(self) -> Path:
        return self.workspace_root / self.storage.directory

    @property
    def snapshot_path(self) -> Path:
        return self.storage_dir / self.storage.snapshot_name
