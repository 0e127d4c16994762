"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``TOYROBOT_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``toyrobot.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Sources are deep-merged, so ``--height`` on the command line overrides
``[board] height`` while keeping ``[board] width`` from the file.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from toyrobot.config.discovery import find_config
from toyrobot.config.models import BoardConfig, ReplConfig

TOML_SECTIONS = ("board", "repl")


def _read_sections(path: Path) -> tuple[dict[str, dict[str, Any]], list[str]]:
    """Parse *path* into the known section tables and the dropped keys.

    Output flags (``json_output``, ``quiet`` ...) belong to the command
    line, so any other top-level key is dropped. Logging is not configured
    yet while settings load; the caller reports the drops afterwards.
    """
    try:
        with path.open("rb") as fh:
            document = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc

    sections: dict[str, dict[str, Any]] = {}
    dropped: list[str] = []
    for key, value in document.items():
        if key in TOML_SECTIONS and isinstance(value, dict):
            sections[key] = value
        else:
            dropped.append(key)
    return sections, dropped


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Supply the ``[board]`` and ``[repl]`` tables of ``toyrobot.toml``.

    Dropped top-level keys surface as ``ignored_keys`` on the settings.
    """

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._sections: dict[str, dict[str, Any]] = {}
        self._dropped: list[str] = []
        if toml_path is not None:
            self._sections, self._dropped = _read_sections(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._sections.get(field_name), field_name, field_name in self._sections

    def __call__(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self._sections)
        if self._dropped:
            data["ignored_keys"] = tuple(self._dropped)
        return data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class RobotSettings(BaseSettings):
    """Unified settings for the toyrobot CLI.

    Stored on the :class:`AppContext` created by the root CLI group.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        ignored_keys: Top-level TOML keys that were dropped on load.
        board: Board dimensions for the session.
        repl: Prompt and banner for the interactive loop.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TOYROBOT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    ignored_keys: tuple[str, ...] = ()

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    board: BoardConfig = Field(default_factory=BoardConfig)
    repl: ReplConfig = Field(default_factory=ReplConfig)

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
        height: int | None = None,
        width: int | None = None,
        **cli_flags: Any,
    ) -> RobotSettings:
        """Construct settings from a CLI invocation.

        Uses *config_path* when given, otherwise discovers ``toyrobot.toml``
        by walking up from *start* (default: cwd). ``None`` dimensions fall
        through to env vars, TOML and defaults.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        board: dict[str, int] = {}
        if height is not None:
            board["height"] = height
        if width is not None:
            board["width"] = width
        if board:
            cli_flags["board"] = board

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
