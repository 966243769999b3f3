"""Sort command handler for fuzzyrank CLI.

Ranks candidates given on the command line and/or read from a file
(one candidate per line, blank lines skipped).
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from fuzzyrank.cli.common.context import get_cli_context
from fuzzyrank.cli.common.error_handler import format_json_output
from fuzzyrank.cli.output import ranked_to_dict, render_ranking
from fuzzyrank.core.matching import rank
from fuzzyrank.shared.constants import CLICommands
from fuzzyrank.shared.errors import (
    ErrorCode,
    ErrorContext,
    InfrastructureError,
    create_cli_error,
    create_file_not_found_error,
)

logger = logging.getLogger(__name__)


def read_candidates(file_path: Path) -> list[str]:
    """Read candidates from a UTF-8 file, one per line.

    Raises:
        InfrastructureError: If the file is missing or unreadable
    """
    try:
        content = file_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise create_file_not_found_error(
            str(file_path),
            operation="read_candidates",
            original_error=e,
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise InfrastructureError(
            ErrorCode.FILE_READ_ERROR,
            f"Failed to read candidates file: {e}",
            ErrorContext(file_path=str(file_path), operation="read_candidates"),
            original_error=e,
        ) from e

    return [line for line in content.splitlines() if line.strip()]


def sort_command(
    needle: str,
    candidates: list[str] | None = None,
    candidates_file: Path | None = None,
    *,
    limit: int = 0,
    show_scores: bool = True,
) -> None:
    """Rank candidates against needle and print them best first.

    Args:
        needle: Query string
        candidates: Candidates given as arguments
        candidates_file: Optional file with more candidates
        limit: Show only the top N (0 shows all)
        show_scores: Include the score column in table output

    Raises:
        CliError: If no candidates were supplied
    """
    context = get_cli_context()
    scoring = context.load_settings().scoring

    haystacks = list(candidates or [])
    if candidates_file is not None:
        haystacks.extend(read_candidates(candidates_file))

    if not haystacks:
        raise create_cli_error(
            "No candidates to rank. Pass them as arguments or with --file.",
            code=ErrorCode.CLI_INVALID_ARGUMENTS,
            command=CLICommands.SORT,
        )

    ranked = rank(haystacks, needle, scoring)
    if limit > 0:
        ranked = ranked[:limit]
    logger.debug("Ranked %d candidate(s) for %r", len(haystacks), needle)

    if context.is_json_output_enabled():
        data = {
            "needle": needle,
            "total_candidates": len(haystacks),
            "results": [
                ranked_to_dict(position, candidate)
                for position, candidate in enumerate(ranked, start=1)
            ],
        }
        typer.echo(format_json_output(CLICommands.SORT, success=True, data=data))
        return

    render_ranking(needle, ranked, show_scores=show_scores)
