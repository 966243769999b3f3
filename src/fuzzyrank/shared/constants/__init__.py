"""
fuzzyrank Constants Module

This module provides centralized constants for the fuzzyrank package.
All magic values and configuration defaults are defined here to ensure
consistency across the codebase.
"""

from .cli import CLICommands, CLIDefaults, CLIFormatting, CLIHelp, CLIOptions
from .logging import Application, Logging
from .matching import MatchingChars, ResultDefaults, ScoringDefaults

__all__ = [
    "Application",
    "CLICommands",
    "CLIDefaults",
    "CLIFormatting",
    "CLIHelp",
    "CLIOptions",
    "Logging",
    "MatchingChars",
    "ResultDefaults",
    "ScoringDefaults",
]
