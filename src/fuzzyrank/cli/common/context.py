"""
CLI Context Management Module

This module provides a centralized system for managing global CLI state
using Pydantic models and ContextVar. It ensures type safety and thread-safe
access to shared configuration across all Typer commands.

The context includes:
- verbose: Verbosity level (int, count-based)
- log_level: Logging level (str, enum-based)
- json_output: JSON output mode (bool)
- config_path: Optional TOML settings file
"""

from __future__ import annotations

import contextvars
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from fuzzyrank.config import Settings, load_settings


class LogLevel(str, Enum):
    """Log level enumeration for type safety."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class CliContext(BaseModel):
    """
    CLI context model for managing global state.

    Attributes:
        verbose: Verbosity level (0 = normal, 1+ = verbose)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Whether to output in JSON format
        config_path: TOML settings file given with --config
    """

    verbose: int = Field(
        default=0,
        ge=0,
        description="Verbosity level (0 = normal, 1+ = verbose)",
    )

    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )

    json_output: bool = Field(
        default=False,
        description="Whether to output in JSON format",
    )

    config_path: Path | None = Field(
        default=None,
        description="TOML settings file",
    )

    def is_verbose(self) -> bool:
        """Check if verbose mode is enabled."""
        return self.verbose > 0

    def get_effective_log_level(self) -> str:
        """
        Get the effective log level after applying verbose override.

        If verbose is enabled, force log level to DEBUG.

        Returns:
            str: Effective log level
        """
        if self.is_verbose():
            return LogLevel.DEBUG.value
        return self.log_level.value

    def is_json_output_enabled(self) -> bool:
        """Check if JSON output is enabled."""
        return self.json_output

    def load_settings(self) -> Settings:
        """Load settings from config_path (if any), .env and the environment."""
        return load_settings(self.config_path)


_cli_context: contextvars.ContextVar[CliContext | None] = contextvars.ContextVar(
    "fuzzyrank_cli_context",
    default=None,
)


def get_cli_context() -> CliContext:
    """
    Get the current CLI context.

    Returns a default context if none has been set, so handlers can be
    called directly (e.g. from tests) without going through the callback.
    """
    context = _cli_context.get()
    if context is None:
        context = CliContext()
        _cli_context.set(context)
    return context


def set_cli_context(context: CliContext) -> None:
    """Set the current CLI context."""
    _cli_context.set(context)


def clear_cli_context() -> None:
    """Reset the CLI context to unset."""
    _cli_context.set(None)
