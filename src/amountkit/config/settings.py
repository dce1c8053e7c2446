"""Presentation and logging settings for host applications.

Sources, highest priority first: keyword overrides, ``AMOUNTKIT_*``
environment variables (``__`` separates nested sections), a TOML file,
and the defaults baked into :mod:`amountkit.config.models`.

The TOML file is ``amountkit.toml`` in the working directory unless
:meth:`AmountkitSettings.load` is given another path. A missing file is
not an error.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    TomlConfigSettingsSource,
)

from amountkit.config.models import FormatConfig

CONFIG_FILENAME = "amountkit.toml"


class ConfigError(Exception):
    """The configuration file could not be read."""


class AmountkitSettings(BaseSettings):
    """Frozen settings object.

    Attributes:
        config_path: The TOML file the settings were read from, if it existed.
        verbose: DEBUG logging for amountkit loggers.
        log_json: JSON log lines instead of console output.
        format: Display options for :class:`~amountkit.domain.amount.Amount`.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "AMOUNTKIT_",
        "env_nested_delimiter": "__",
        "toml_file": CONFIG_FILENAME,
    }

    config_path: Path | None = None

    verbose: bool = False
    log_json: bool = False

    format: FormatConfig = Field(default_factory=FormatConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Read the ``toml_file`` from model_config below env vars."""
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )

    @classmethod
    def load(cls, config_path: str | Path | None = None, **overrides: Any) -> AmountkitSettings:
        """Build settings from *config_path* (default ``./amountkit.toml``).

        Raises:
            ConfigError: the file exists but is not valid TOML.
        """
        settings_cls = cls
        if config_path is not None:
            path = Path(config_path)
            settings_cls = type(
                cls.__name__,
                (cls,),
                {"model_config": {**cls.model_config, "toml_file": path}},
            )
        else:
            path = Path(CONFIG_FILENAME)

        overrides.setdefault("config_path", path if path.is_file() else None)
        try:
            return settings_cls(**overrides)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
