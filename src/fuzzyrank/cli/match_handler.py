"""Match command handler for fuzzyrank CLI."""

from __future__ import annotations

import logging

import typer

from fuzzyrank.cli.common.context import get_cli_context
from fuzzyrank.cli.common.error_handler import format_json_output
from fuzzyrank.cli.output import render_match, result_to_dict
from fuzzyrank.core.matching import match_with_config, score_breakdown
from fuzzyrank.shared.constants import CLICommands

logger = logging.getLogger(__name__)


def match_command(needle: str, haystack: str, *, explain: bool = False) -> None:
    """Score needle against haystack and print the best alignment.

    Args:
        needle: Query string
        haystack: Candidate string
        explain: Also print the individual score terms
    """
    context = get_cli_context()
    scoring = context.load_settings().scoring

    result = match_with_config(scoring, needle, haystack)
    # An empty result has no alignment to break down
    breakdown = (
        score_breakdown(scoring, haystack, result.matches)
        if explain and result.matched
        else None
    )
    logger.debug("match %r in %r -> %s", needle, haystack, result)

    if context.is_json_output_enabled():
        data = {
            "needle": needle,
            "haystack": haystack,
            **result_to_dict(result),
        }
        if breakdown is not None:
            data["breakdown"] = breakdown.as_dict()
        typer.echo(format_json_output(CLICommands.MATCH, success=True, data=data))
        return

    render_match(needle, haystack, result, breakdown)
