"""Logging configuration model.

This module contains the configuration model for logging output.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from fuzzyrank.shared.constants import Logging

_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(BaseModel):
    """Logging configuration.

    This class manages logging behavior including level, optional
    JSON file output, and console output.
    """

    level: str = Field(default=Logging.DEFAULT_LEVEL, description="Logging level")
    file: str | None = Field(default=None, description="JSON log file path")
    console_output: bool = Field(
        default=True,
        description="Log to the console through rich (JSON lines when disabled)",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        """Normalize the level name and reject unknown levels."""
        normalized = value.upper()
        if normalized not in _VALID_LEVELS:
            msg = f"Invalid log level '{value}'. Expected one of {', '.join(_VALID_LEVELS)}"
            raise ValueError(msg)
        return normalized


__all__ = ["LoggingSettings"]
