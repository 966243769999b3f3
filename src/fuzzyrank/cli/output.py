"""Rich and JSON rendering for fuzzyrank CLI commands."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from fuzzyrank.config.models.scoring_config import ScoringConfig
from fuzzyrank.core.matching.models import RankedCandidate, Result, ScoreBreakdown
from fuzzyrank.shared.constants import CLIFormatting

console = Console()


def highlight_matches(haystack: str, matches: tuple[int, ...]) -> Text:
    """Return haystack as rich Text with matched positions highlighted."""
    text = Text(haystack)
    for position in matches:
        text.stylize(CLIFormatting.HIGHLIGHT_STYLE, position, position + 1)
    return text


def result_to_dict(result: Result) -> dict[str, Any]:
    return {"score": result.score, "matches": list(result.matches)}


def ranked_to_dict(rank: int, candidate: RankedCandidate) -> dict[str, Any]:
    return {
        "rank": rank,
        "haystack": candidate.haystack,
        **result_to_dict(candidate.result),
    }


def render_match(
    needle: str,
    haystack: str,
    result: Result,
    breakdown: ScoreBreakdown | None = None,
) -> None:
    """Print a single match result, optionally with its score terms."""
    console.print(Text.assemble("Needle:   ", (needle, "bold")))
    console.print(Text.assemble("Haystack: ", highlight_matches(haystack, result.matches)))
    console.print(
        Text.assemble(
            "Score:    ",
            (str(result.score), CLIFormatting.SCORE_STYLE),
            f"  matches={list(result.matches)}",
        ),
    )

    if breakdown is None:
        return

    table = Table(title="Score terms", header_style=CLIFormatting.TABLE_HEADER_STYLE)
    table.add_column("Term")
    table.add_column("Value", justify="right")
    for term, value in breakdown.as_dict().items():
        table.add_row(term, str(value))
    console.print(table)


def render_ranking(
    needle: str,
    ranked: list[RankedCandidate],
    *,
    show_scores: bool,
) -> None:
    """Print candidates best-first as a table."""
    table = Table(
        title=f"Ranking for {needle!r}",
        header_style=CLIFormatting.TABLE_HEADER_STYLE,
    )
    table.add_column("#", justify="right", style=CLIFormatting.RANK_STYLE)
    if show_scores:
        table.add_column("Score", justify="right", style=CLIFormatting.SCORE_STYLE)
    table.add_column("Candidate", overflow="fold")

    for rank, candidate in enumerate(ranked, start=1):
        cells: list[str | Text] = [str(rank)]
        if show_scores:
            cells.append(str(candidate.score))
        cells.append(highlight_matches(candidate.haystack, candidate.result.matches))
        table.add_row(*cells)

    console.print(table)


def render_scoring_config(scoring: ScoringConfig) -> None:
    """Print the effective scoring weights as a table."""
    table = Table(title="Scoring configuration", header_style=CLIFormatting.TABLE_HEADER_STYLE)
    table.add_column("Setting")
    table.add_column("Value", justify="right")
    for name, value in scoring.model_dump().items():
        table.add_row(name, str(value))
    console.print(table)
