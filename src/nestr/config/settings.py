"""NestrSettings — CLI flags, environment, and nestr.toml in one object.

Sources, highest priority first: keyword arguments from the CLI,
``NESTR_*`` environment variables (``__`` separates nested keys, as in
``NESTR_PAD__FILL``), the discovered nestr.toml, and the defaults on the
section models in :mod:`nestr.config.models`.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    InitSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from nestr.config.discovery import find_config
from nestr.config.models import OutputConfig, PadConfig

# Parsed nestr.toml for the settings object that from_cli() is building.
_toml_data: ContextVar[dict[str, Any] | None] = ContextVar("nestr_toml_data", default=None)


def _read_toml(path: Path | None) -> dict[str, Any]:
    if path is None:
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


class NestrSettings(BaseSettings):
    """Resolved settings for one nestr invocation.

    Attributes:
        config_path: The nestr.toml that was applied, or None.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="NESTR_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    pad: PadConfig = Field(default_factory=PadConfig)
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
        """CLI kwargs, then environment, then nestr.toml. No dotenv or secrets."""
        toml_settings = InitSettingsSource(settings_cls, init_kwargs=_toml_data.get() or {})
        return init_settings, env_settings, toml_settings

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> NestrSettings:
        """Build settings for a CLI run.

        An explicit *config_path* is used only if it names a file; without
        one, nestr.toml is discovered by walking up from *start*.

        Raises:
            click.ClickException: The config file is not valid TOML.
        """
        if config_path:
            candidate = Path(config_path)
            toml_path = candidate if candidate.is_file() else None
        else:
            toml_path = find_config(start)

        token = _toml_data.set(_read_toml(toml_path))
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _toml_data.reset(token)
