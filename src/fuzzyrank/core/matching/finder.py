"""Bounded backtracking search for fuzzy alignments.

This module enumerates the ways a needle's characters can be aligned, in
order, onto positions of a haystack. It does not score anything: every
alignment it produces is handed to the scorer and the engine keeps the best.

Each time a needle character matches, the search forks:

1. the primary continuation takes the position and moves both cursors on;
2. the alternative continuation skips the position, keeps only the head
   sequence built so far, and looks one haystack position further along.

Only the alternative continuation increases the recursion depth, so the
plain left-to-right scan stays linear and the extra search for a better
(typically more contiguous) alignment is capped by
``ScoringConfig.max_recursion_depth``. For a needle of length ``n`` and a
depth cap ``d`` the search is invoked at most ``C(n + d, d)`` times,
whatever the haystack length.
"""

from __future__ import annotations

import logging

from fuzzyrank.config.models.scoring_config import ScoringConfig
from fuzzyrank.core.matching.models import MatchSequence

logger = logging.getLogger(__name__)

# Case-folded text, one entry per code point of the original string
FoldedText = tuple[str, ...]


def fold_case(text: str) -> FoldedText:
    """Lowercase text one code point at a time.

    Folding per character keeps positions aligned with the original string
    even where a character lowercases to more than one code point.

    Example:
        >>> fold_case("AbC")
        ('a', 'b', 'c')
    """
    return tuple(char.lower() for char in text)


def find_matches(
    config: ScoringConfig,
    needle: str,
    haystack: str,
) -> list[MatchSequence]:
    """Find candidate alignments of needle inside haystack.

    Matching is case-insensitive. Alignments are returned in generation
    order: a fork's primary results come before its alternative results.
    Partial alignments (haystack exhausted or depth reached before the
    needle was consumed) are included.

    Args:
        config: Scoring configuration; only max_recursion_depth is used
        needle: Query string
        haystack: Candidate string

    Returns:
        List of strictly increasing position tuples. Empty when the needle
        is empty or no needle character occurs in the haystack.

    Example:
        >>> find_matches(ScoringConfig(), "ab", "xab")
        [(1, 2), (1,)]
    """
    candidates = _search(
        config.max_recursion_depth,
        fold_case(needle),
        fold_case(haystack),
        needle_index=0,
        haystack_index=0,
        matches=[],
        recursion_depth=0,
    )
    logger.debug(
        "Found %d candidate alignment(s) for needle of length %d in haystack of length %d",
        len(candidates),
        len(needle),
        len(haystack),
    )
    return candidates


def _search(
    max_recursion_depth: int,
    needle: FoldedText,
    haystack: FoldedText,
    needle_index: int,
    haystack_index: int,
    matches: list[MatchSequence],
    recursion_depth: int,
) -> list[MatchSequence]:
    """Advance the cursors from the given state and collect alignments.

    The primary continuation and the no-match step are iterated in place;
    only alternative continuations recurse, so the stack depth is bounded
    by max_recursion_depth rather than by the haystack length.
    """
    alternatives: list[list[MatchSequence]] = []

    while (
        needle_index < len(needle)
        and haystack_index < len(haystack)
        and recursion_depth < max_recursion_depth
    ):
        if needle[needle_index] == haystack[haystack_index]:
            # Alternative: leave this position unused, head sequence only
            alternatives.append(
                _search(
                    max_recursion_depth,
                    needle,
                    haystack,
                    needle_index,
                    haystack_index + 1,
                    matches[:1],
                    recursion_depth + 1,
                ),
            )
            matches = _extend_head(matches, haystack_index)
            needle_index += 1
        haystack_index += 1

    # Innermost fork's alternatives follow the primary result directly
    results = list(matches)
    for found in reversed(alternatives):
        results.extend(found)
    return results


def _extend_head(matches: list[MatchSequence], position: int) -> list[MatchSequence]:
    """Append position to the most recently started sequence."""
    if not matches:
        return [(position,)]
    return [(*matches[0], position), *matches[1:]]


__all__ = ["FoldedText", "find_matches", "fold_case"]
