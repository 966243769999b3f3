"""Configuration models for fuzzyrank."""

from __future__ import annotations

from .app_settings import LoggingSettings
from .scoring_config import DEFAULT_SCORING_CONFIG, ScoringConfig
from .settings import Settings

__all__ = [
    "DEFAULT_SCORING_CONFIG",
    "LoggingSettings",
    "ScoringConfig",
    "Settings",
]
