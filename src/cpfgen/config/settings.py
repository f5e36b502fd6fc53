"""Runtime settings for cpfgen.

Sources, strongest first: CLI flags, ``CPFGEN_*`` environment variables
(``__`` separates nested keys, e.g. ``CPFGEN_GENERATOR__COUNT``), the
nearest ``cpfgen.toml``, then the defaults in :mod:`cpfgen.config.models`.
"""

from __future__ import annotations

import os
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from cpfgen.config.models import GeneratorConfig, MenuConfig

CONFIG_FILENAME = "cpfgen.toml"
CONFIG_ENV_VAR = "CPFGEN_CONFIG"

# TOML file for the settings object currently being built.
_active_toml: ContextVar[Path | None] = ContextVar("_active_toml", default=None)


def find_config(start: Path | None = None) -> Path | None:
    """Return ``$CPFGEN_CONFIG`` if set, else the nearest ``cpfgen.toml``.

    The search covers *start* (default: cwd) and each of its parents.
    A ``$CPFGEN_CONFIG`` pointing at a missing file disables the search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class CpfSettings(BaseSettings):
    """Everything a command needs to know, frozen once resolved."""

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="CPFGEN_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    menu: MenuConfig = Field(default_factory=MenuConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: list[PydanticBaseSettingsSource] = [init_settings, env_settings]
        toml_path = _active_toml.get()
        if toml_path is not None:
            sources.append(TomlConfigSettingsSource(settings_cls, toml_file=toml_path))
        return tuple(sources)

    @classmethod
    def load(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **flags: Any,
    ) -> CpfSettings:
        """Resolve settings for one invocation.

        An explicit *config_path* replaces discovery; if it does not exist
        no file is read. Raises ``tomllib.TOMLDecodeError`` for a malformed
        file and ``pydantic.ValidationError`` for out-of-range values.
        """
        toml_path = Path(config_path) if config_path else find_config(start)
        if toml_path is not None and not toml_path.is_file():
            toml_path = None

        token = _active_toml.set(toml_path)
        try:
            return cls(config_path=toml_path, **flags)
        finally:
            _active_toml.reset(token)
