"""
Reusable Typer Options Module

This module provides reusable Typer option types shared by the main
callback. It ensures consistency by centralizing common option definitions.

The options include:
- verbose: Verbosity level (count-based)
- log_level: Logging level (enum-based)
- json_output: JSON output mode (flag-based)
- version: Version flag (eager)
- config: TOML settings file
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from fuzzyrank.cli.common.context import LogLevel
from fuzzyrank.shared.constants import CLIHelp, CLIOptions

# Verbose option - count-based for multiple -v flags
VerboseOption = Annotated[
    int,
    typer.Option(
        CLIOptions.VERBOSE,
        CLIOptions.VERBOSE_SHORT,
        count=True,
        help="Enable verbose output (equivalent to --log-level DEBUG).",
    ),
]

# Log level option - enum-based, falls back to the settings file level
LogLevelOption = Annotated[
    Optional[LogLevel],
    typer.Option(
        CLIOptions.LOG_LEVEL,
        case_sensitive=False,
        help="Set the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: from settings (INFO).",
    ),
]

# JSON output option - flag-based
JsonOutputOption = Annotated[
    bool,
    typer.Option(
        CLIOptions.JSON,
        help="Enable machine-readable JSON output instead of human-readable format.",
    ),
]

# Version option - for main app only
VersionOption = Annotated[
    bool,
    typer.Option(
        CLIOptions.VERSION,
        CLIOptions.VERSION_SHORT,
        help=CLIHelp.VERSION_HELP,
        is_eager=True,
    ),
]

# Settings file option
ConfigOption = Annotated[
    Optional[Path],
    typer.Option(
        CLIOptions.CONFIG,
        CLIOptions.CONFIG_SHORT,
        help=CLIHelp.CONFIG_OPTION_HELP,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
]
