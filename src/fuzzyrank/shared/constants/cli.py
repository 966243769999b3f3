"""
CLI Configuration Constants

This module contains all constants related to command-line interface
configuration, default values, and user interaction settings.
"""

from typing import Literal


class CLIOptions:
    """CLI option names and flags."""

    # Common options
    VERBOSE = "--verbose"
    VERBOSE_SHORT = "-v"
    LOG_LEVEL = "--log-level"
    JSON = "--json"
    VERSION = "--version"
    VERSION_SHORT = "-V"
    CONFIG = "--config"
    CONFIG_SHORT = "-c"

    # Match options
    EXPLAIN = "--explain"

    # Sort options
    FILE = "--file"
    FILE_SHORT = "-f"
    LIMIT = "--limit"
    LIMIT_SHORT = "-n"
    SHOW_SCORES = "--show-scores"

    # Config options
    WRITE = "--write"


class CLICommands:
    """CLI command names."""

    MATCH = "match"
    SORT = "sort"
    CONFIG = "config"


class CLIHelp:
    """CLI help text and descriptions."""

    # Version
    VERSION_HELP = "Print version information and exit."
    VERSION_TEXT = "fuzzyrank CLI v{version}"

    # App info
    APP_NAME = "fuzzyrank"
    APP_DESCRIPTION = "fuzzyrank - Fuzzy search-as-you-type ranking"
    APP_STYLE: Literal["rich"] = "rich"

    CONFIG_OPTION_HELP = "TOML settings file (scoring weights and logging)."

    # Match command
    MATCH_HELP = "Score a single needle against a single haystack"
    MATCH_NEEDLE_HELP = "Query string to look for"
    MATCH_HAYSTACK_HELP = "Candidate string to search within"
    MATCH_EXPLAIN_HELP = "Show the individual score terms"

    # Sort command
    SORT_HELP = "Rank candidates by how well they match a needle"
    SORT_NEEDLE_HELP = "Query string to rank candidates against"
    SORT_CANDIDATES_HELP = "Candidate strings to rank"
    SORT_FILE_HELP = "Read additional candidates from a file, one per line"
    SORT_LIMIT_HELP = "Only show the top N candidates"
    SORT_SHOW_SCORES_HELP = "Include the score column in table output"

    # Config command
    CONFIG_HELP = "Show the effective scoring configuration"
    CONFIG_WRITE_HELP = "Save the effective settings to a TOML file"


class CLIDefaults:
    """CLI default values."""

    # Version information
    VERSION = "0.1.0"

    # Exit codes
    EXIT_SUCCESS = 0
    EXIT_INTERRUPTED = 130

    # Default numeric values
    DEFAULT_VERBOSE = 0
    DEFAULT_LIMIT = 0  # 0 means no limit

    # Default boolean values
    DEFAULT_JSON = False
    DEFAULT_EXPLAIN = False
    DEFAULT_SHOW_SCORES = True


class CLIFormatting:
    """Rich markup used by CLI output."""

    HIGHLIGHT_STYLE = "bold yellow"
    SCORE_STYLE = "cyan"
    RANK_STYLE = "dim"
    TABLE_HEADER_STYLE = "bold magenta"
