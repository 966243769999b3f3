"""Settings loader.

This module handles:
- Environment variable loading from an optional .env file
- Configuration file loading from TOML
- Mapping of load failures onto structured ApplicationErrors
"""

from __future__ import annotations

import logging
from pathlib import Path

import toml
from dotenv import load_dotenv
from pydantic import ValidationError

from fuzzyrank.config.models.settings import Settings
from fuzzyrank.shared.constants import Application
from fuzzyrank.shared.errors import (
    ErrorCode,
    create_config_error,
)

logger = logging.getLogger(__name__)


def _load_env_file(env_file: Path | None = None) -> bool:
    """Load environment variables from a .env file if one exists.

    Variables already present in the environment are not overridden.

    Args:
        env_file: Path to the .env file (defaults to ./.env)

    Returns:
        True if a file was found and loaded
    """
    env_file = env_file or Path(Application.ENV_FILE)
    if not env_file.is_file():
        return False

    load_dotenv(env_file, override=False)
    logger.debug("Loaded environment from %s", env_file)
    return True


def load_settings(
    config_path: str | Path | None = None,
    env_file: Path | None = None,
) -> Settings:
    """Load settings from an optional TOML file, .env and the environment.

    Args:
        config_path: Optional path to a TOML configuration file. If None,
                     settings come from defaults and environment variables.
        env_file: Optional .env path (defaults to ./.env)

    Returns:
        Validated Settings instance

    Raises:
        ApplicationError: If the file is missing, is not valid TOML, or
                          contains values that fail validation
    """
    _load_env_file(env_file)

    if config_path is None:
        try:
            return Settings()
        except ValidationError as e:
            raise create_config_error(
                f"Invalid settings in environment: {e.error_count()} validation error(s)",
                code=ErrorCode.CONFIG_INVALID,
                operation="load_settings",
                original_error=e,
            ) from e

    config_path = Path(config_path)
    try:
        settings = Settings.from_toml_file(config_path)
    except FileNotFoundError as e:
        raise create_config_error(
            f"Configuration file not found: {config_path}",
            code=ErrorCode.CONFIG_MISSING,
            config_path=str(config_path),
            operation="load_settings",
            original_error=e,
        ) from e
    except toml.TomlDecodeError as e:
        raise create_config_error(
            f"Configuration file is not valid TOML: {e}",
            code=ErrorCode.CONFIG_INVALID,
            config_path=str(config_path),
            operation="load_settings",
            original_error=e,
        ) from e
    except ValidationError as e:
        raise create_config_error(
            f"Invalid settings in {config_path.name}: {e.error_count()} validation error(s)",
            code=ErrorCode.CONFIG_INVALID,
            config_path=str(config_path),
            operation="load_settings",
            original_error=e,
        ) from e
    except OSError as e:
        raise create_config_error(
            f"Failed to read configuration file: {e}",
            code=ErrorCode.CONFIG_ERROR,
            config_path=str(config_path),
            operation="load_settings",
            original_error=e,
        ) from e

    logger.debug("Loaded settings from %s", config_path)
    return settings


def save_settings(settings: Settings, config_path: str | Path) -> Path:
    """Write settings to a TOML file.

    Raises:
        ApplicationError: If the file cannot be written
    """
    config_path = Path(config_path)
    try:
        settings.to_toml_file(config_path)
    except OSError as e:
        raise create_config_error(
            f"Failed to write configuration file: {e}",
            code=ErrorCode.CONFIG_ERROR,
            config_path=str(config_path),
            operation="save_settings",
            original_error=e,
        ) from e

    logger.debug("Configuration saved to %s", config_path)
    return config_path


__all__ = ["load_settings", "save_settings"]
