"""Configuration package for fuzzyrank.

Scoring weights live in ScoringConfig; Settings wraps them together with
logging configuration for TOML/environment loading.
"""

from .loader import load_settings, save_settings
from .models import DEFAULT_SCORING_CONFIG, LoggingSettings, ScoringConfig, Settings

__all__ = [
    "DEFAULT_SCORING_CONFIG",
    "LoggingSettings",
    "ScoringConfig",
    "Settings",
    "load_settings",
    "save_settings",
]
