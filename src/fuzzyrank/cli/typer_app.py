"""
fuzzyrank Typer CLI Application

This is the Typer-based command-line interface for fuzzyrank. It exposes
the matcher for interactive use: scoring one needle/haystack pair,
ranking a list of candidates, and inspecting the effective settings.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, List, Optional

import typer

from fuzzyrank.cli.common.context import (
    CliContext,
    LogLevel,
    get_cli_context,
    set_cli_context,
)
from fuzzyrank.cli.common.error_handler import handle_cli_error
from fuzzyrank.cli.common.options import (
    ConfigOption,
    JsonOutputOption,
    LogLevelOption,
    VerboseOption,
    VersionOption,
)
from fuzzyrank.cli.config_handler import config_command
from fuzzyrank.cli.match_handler import match_command
from fuzzyrank.cli.sort_handler import sort_command
from fuzzyrank.config import load_settings
from fuzzyrank.shared.constants import (
    CLICommands,
    CLIDefaults,
    CLIHelp,
    CLIOptions,
)
from fuzzyrank.shared.logging import setup_structured_logger

# Version information
__version__ = CLIDefaults.VERSION


def version_callback(value: bool) -> None:
    """Print version information and exit."""
    if value:
        typer.echo(CLIHelp.VERSION_TEXT.format(version=__version__))
        raise typer.Exit


def main_callback(
    verbose: int,
    log_level: LogLevel | None,
    json_output: bool,
    version: bool,
    config_path: Path | None,
) -> None:
    """
    Process the common options.

    This function is called before any command is executed. It sets up
    the global CLI context and configures logging from the parsed options
    and the logging section of the settings.

    Args:
        verbose: Verbosity level (count-based)
        log_level: Logging level, or None to use the settings file level
        json_output: Whether to output in JSON format
        version: Whether to show version information
        config_path: Optional TOML settings file
    """
    # Handle version option first
    if version:
        version_callback(value=True)

    logging_settings = load_settings(config_path).logging

    context = CliContext(
        verbose=verbose,
        log_level=log_level or LogLevel(logging_settings.level),
        json_output=json_output,
        config_path=config_path,
    )
    set_cli_context(context)

    setup_structured_logger(
        level=context.get_effective_log_level(),
        log_file=logging_settings.file,
        use_rich_console=logging_settings.console_output and not json_output,
    )


app = typer.Typer(
    name=CLIHelp.APP_NAME,
    help=CLIHelp.APP_DESCRIPTION,
    add_completion=False,
    rich_markup_mode=CLIHelp.APP_STYLE,
    no_args_is_help=True,
    invoke_without_command=True,
)


@app.callback()
def main(
    verbose: VerboseOption = CLIDefaults.DEFAULT_VERBOSE,
    log_level: LogLevelOption = None,
    json_output: JsonOutputOption = CLIDefaults.DEFAULT_JSON,
    version: VersionOption = False,
    config_path: ConfigOption = None,
) -> None:
    """Main CLI callback with error handling."""
    try:
        main_callback(verbose, log_level, json_output, version, config_path)
    except typer.Exit:
        raise
    except Exception as e:
        exit_code = handle_cli_error(e, "main-callback", json_output=json_output)
        raise typer.Exit(exit_code) from e


def _run(
    command: str,
    func: Callable[..., None],
    *args: Any,
    **kwargs: Any,
) -> None:
    """Run a command handler, turning any failure into an exit code."""
    json_output = get_cli_context().is_json_output_enabled()
    try:
        func(*args, **kwargs)
    except Exception as e:
        exit_code = handle_cli_error(e, command, json_output=json_output)
        raise typer.Exit(exit_code) from e


@app.command(CLICommands.MATCH, help=CLIHelp.MATCH_HELP)
def match_command_typer(
    needle: str = typer.Argument(..., help=CLIHelp.MATCH_NEEDLE_HELP),
    haystack: str = typer.Argument(..., help=CLIHelp.MATCH_HAYSTACK_HELP),
    explain: bool = typer.Option(
        CLIDefaults.DEFAULT_EXPLAIN,
        CLIOptions.EXPLAIN,
        help=CLIHelp.MATCH_EXPLAIN_HELP,
    ),
) -> None:
    """
    Score a needle against one haystack.

    Prints the best alignment's score and the haystack with the matched
    characters highlighted.

    Examples:
        # Contiguous tail match beats the scattered first letters
        fuzzyrank match cars "classic cars"

        # Show how the score is made up
        fuzzyrank match --explain fb FooBar
    """
    _run(CLICommands.MATCH, match_command, needle, haystack, explain=explain)


@app.command(CLICommands.SORT, help=CLIHelp.SORT_HELP)
def sort_command_typer(
    needle: str = typer.Argument(..., help=CLIHelp.SORT_NEEDLE_HELP),
    candidates: Optional[List[str]] = typer.Argument(
        None,
        help=CLIHelp.SORT_CANDIDATES_HELP,
        show_default=False,
    ),
    candidates_file: Optional[Path] = typer.Option(
        None,
        CLIOptions.FILE,
        CLIOptions.FILE_SHORT,
        help=CLIHelp.SORT_FILE_HELP,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    limit: int = typer.Option(
        CLIDefaults.DEFAULT_LIMIT,
        CLIOptions.LIMIT,
        CLIOptions.LIMIT_SHORT,
        min=0,
        help=CLIHelp.SORT_LIMIT_HELP,
    ),
    show_scores: bool = typer.Option(
        CLIDefaults.DEFAULT_SHOW_SCORES,
        f"{CLIOptions.SHOW_SCORES}/--hide-scores",
        help=CLIHelp.SORT_SHOW_SCORES_HELP,
    ),
) -> None:
    """
    Rank candidates by how well they match a needle, best first.

    Candidates with equal scores are listed in reverse input order.

    Examples:
        fuzzyrank sort an apple banana orange pear

        # Read candidates from a file and keep the top five
        fuzzyrank sort --file names.txt --limit 5 an
    """
    _run(
        CLICommands.SORT,
        sort_command,
        needle,
        candidates,
        candidates_file,
        limit=limit,
        show_scores=show_scores,
    )


@app.command(CLICommands.CONFIG, help=CLIHelp.CONFIG_HELP)
def config_command_typer(
    write_path: Optional[Path] = typer.Option(
        None,
        CLIOptions.WRITE,
        help=CLIHelp.CONFIG_WRITE_HELP,
        dir_okay=False,
        writable=True,
    ),
) -> None:
    """
    Show the effective scoring configuration.

    Settings come from defaults, the --config file, a .env file and
    FUZZYRANK_* environment variables, e.g. FUZZYRANK_SCORING__SEQUENTIAL_BONUS=40.
    """
    _run(CLICommands.CONFIG, config_command, write_path)


if __name__ == "__main__":
    app()
