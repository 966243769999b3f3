"""Heuristic scoring of a single fuzzy alignment.

This module turns one candidate alignment (a strictly increasing tuple of
haystack positions) into an integer score. The score is the sum of six
independent terms, each computed by its own helper:

- leading penalty, for matches that start deep into the haystack (floored)
- unmatched penalty, for every haystack character not used by the match
- first-letter bonus, when the match starts at position 0
- sequential bonus, for each pair of adjacent matched positions
- separator bonus, for each match directly after a space
- camelCase bonus, for each match on a lowercase-to-uppercase transition

Scoring always looks at the original-case haystack, even though the
search that produced the alignment compared case-folded text.
"""

from __future__ import annotations

from fuzzyrank.config.models.scoring_config import ScoringConfig
from fuzzyrank.core.matching.models import MatchSequence, ScoreBreakdown
from fuzzyrank.shared.constants import MatchingChars


def score(config: ScoringConfig, haystack: str, sequence: MatchSequence) -> int:
    """Score one alignment of a needle inside haystack.

    Args:
        config: Scoring weights
        haystack: Original (not case-folded) candidate string
        sequence: Strictly increasing haystack positions

    Returns:
        Integer score; higher is better

    Example:
        >>> score(ScoringConfig(), "classic cars", (8, 9, 10, 11))
        97
    """
    return score_breakdown(config, haystack, sequence).total


def score_breakdown(
    config: ScoringConfig,
    haystack: str,
    sequence: MatchSequence,
) -> ScoreBreakdown:
    """Compute every score term of one alignment separately.

    Args:
        config: Scoring weights
        haystack: Original (not case-folded) candidate string
        sequence: Strictly increasing haystack positions

    Returns:
        ScoreBreakdown whose total equals score()
    """
    return ScoreBreakdown(
        leading=_calculate_leading_penalty(config, sequence),
        unmatched=_calculate_unmatched_penalty(config, haystack, sequence),
        first_letter=_calculate_first_letter_bonus(config, sequence),
        sequential=_calculate_sequential_bonus(config, sequence),
        separator=_calculate_separator_bonus(config, haystack, sequence),
        camel_case=_calculate_camel_case_bonus(config, haystack, sequence),
    )


def _calculate_leading_penalty(config: ScoringConfig, sequence: MatchSequence) -> int:
    """Penalty proportional to the first matched position, floored.

    Both weights are non-positive, so max() caps how negative this can get.
    """
    first_index = sequence[0] if sequence else 0
    return max(
        config.max_leading_letter_penalty,
        config.leading_letter_penalty * first_index,
    )


def _calculate_unmatched_penalty(
    config: ScoringConfig,
    haystack: str,
    sequence: MatchSequence,
) -> int:
    return config.unmatched_letter_penalty * (len(haystack) - len(sequence))


def _calculate_first_letter_bonus(config: ScoringConfig, sequence: MatchSequence) -> int:
    if sequence and sequence[0] == 0:
        return config.first_letter_bonus
    return 0


def _calculate_sequential_bonus(config: ScoringConfig, sequence: MatchSequence) -> int:
    adjacent_pairs = sum(
        1 for previous, current in zip(sequence, sequence[1:]) if current - previous == 1
    )
    return config.sequential_bonus * adjacent_pairs


def _calculate_separator_bonus(
    config: ScoringConfig,
    haystack: str,
    sequence: MatchSequence,
) -> int:
    word_starts = sum(
        1
        for index in sequence
        if index > 0 and haystack[index - 1] == MatchingChars.SEPARATOR
    )
    return config.separator_bonus * word_starts


def _calculate_camel_case_bonus(
    config: ScoringConfig,
    haystack: str,
    sequence: MatchSequence,
) -> int:
    transitions = sum(
        1
        for index in sequence
        if index > 0 and _is_camel_case_boundary(haystack[index - 1], haystack[index])
    )
    return config.camel_case_bonus * transitions


def _is_camel_case_boundary(previous: str, current: str) -> bool:
    """True when previous is lowercase (not a space) and current is uppercase.

    "Lowercase" means unchanged by lower(), so digits and punctuation
    count; "uppercase" means a cased character that lower() changes.
    """
    return (
        previous != MatchingChars.SEPARATOR
        and previous == previous.lower()
        and current != current.lower()
    )


__all__ = ["score", "score_breakdown"]
