"""fuzzyrank Settings Configuration Model.

Main Settings class that consolidates the scoring weights and logging
configuration, loadable from TOML with environment variable overrides.
"""

from __future__ import annotations

from pathlib import Path

import toml
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from fuzzyrank.config.models.app_settings import LoggingSettings
from fuzzyrank.config.models.scoring_config import ScoringConfig
from fuzzyrank.shared.constants import Application


class Settings(BaseSettings):
    """Unified configuration for fuzzyrank.

    Environment variables use the ``FUZZYRANK_`` prefix and ``__`` as the
    nested delimiter, e.g. ``FUZZYRANK_SCORING__SEQUENTIAL_BONUS=40``.
    Environment values take precedence over values read from TOML.
    """

    model_config = SettingsConfigDict(
        env_prefix=Application.ENV_PREFIX,
        env_nested_delimiter=Application.ENV_NESTED_DELIMITER,
        env_ignore_empty=True,
        extra="ignore",
    )

    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Let environment variables override values passed in from TOML."""
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @classmethod
    def from_toml_file(cls, file_path: str | Path) -> Settings:
        """Load settings from TOML file with environment variable overrides."""

        file_path = Path(file_path)
        if not file_path.exists():
            msg = f"Configuration file not found: {file_path}"
            raise FileNotFoundError(msg)

        raw_config = toml.load(file_path)
        return cls(**raw_config)

    def to_toml_file(self, file_path: str | Path) -> None:
        """Save settings to TOML file."""

        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        config_dict = self.model_dump(exclude_none=True)

        with open(file_path, "w", encoding="utf-8") as f:
            toml.dump(config_dict, f)


__all__ = ["Settings"]
