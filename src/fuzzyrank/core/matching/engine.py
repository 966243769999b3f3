"""Fuzzy ranking engine.

This module orchestrates the matching process:
1. Finding candidate alignments of the needle inside each haystack
2. Scoring every candidate alignment
3. Selecting the best alignment per haystack
4. Ordering haystacks by their best score

Ties are resolved the same way at both levels: a stable ascending sort
followed by a full reversal. Among equal scores this puts the element that
came *last* first, so it is not the same as ``sorted(..., reverse=True)``.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable

from fuzzyrank.config.models.scoring_config import DEFAULT_SCORING_CONFIG, ScoringConfig
from fuzzyrank.core.matching.finder import find_matches
from fuzzyrank.core.matching.models import MatchSequence, RankedCandidate, Result
from fuzzyrank.core.matching.scoring import score
from fuzzyrank.shared.logging import log_operation_start, log_operation_success

logger = logging.getLogger(__name__)


def match_with_config(config: ScoringConfig, needle: str, haystack: str) -> Result:
    """Find the best-scoring alignment of needle inside haystack.

    The same config bounds the search and weights the score.

    Args:
        config: Search bound and scoring weights
        needle: Query string
        haystack: Candidate string

    Returns:
        Result with the maximum score. Among equal maxima the alignment
        generated last by the search wins. Result(0, ()) when there is no
        candidate at all (empty needle, or no shared characters).

    Example:
        >>> match_with_config(ScoringConfig(), "cars", "classic cars").matches
        (8, 9, 10, 11)
    """
    candidates = find_matches(config, needle, haystack)
    if not candidates:
        return Result.empty()

    scored = [(sequence, score(config, haystack, sequence)) for sequence in candidates]
    best_sequence, best_score = _select_best(scored)

    logger.debug(
        "Best of %d candidate(s) for %r in %r: score=%d matches=%s",
        len(scored),
        needle,
        haystack,
        best_score,
        best_sequence,
    )
    return Result(score=best_score, matches=best_sequence)


def match(needle: str, haystack: str) -> Result:
    """Find the best alignment using the default scoring configuration."""
    return match_with_config(DEFAULT_SCORING_CONFIG, needle, haystack)


def rank(
    haystacks: Iterable[str],
    needle: str,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> list[RankedCandidate]:
    """Match needle against every haystack and order by descending score.

    Haystacks with equal scores come out in reverse input order.

    Args:
        haystacks: Candidate strings
        needle: Query string
        config: Search bound and scoring weights

    Returns:
        RankedCandidates, best first
    """
    started = time.perf_counter()
    log_operation_start(logger, "rank", {"needle": needle})

    ranked = [
        RankedCandidate(haystack=haystack, result=match_with_config(config, needle, haystack))
        for haystack in haystacks
    ]
    ranked.sort(key=_candidate_sort_key)
    ranked.reverse()

    log_operation_success(
        logger,
        "rank",
        duration_ms=(time.perf_counter() - started) * 1000,
        result_info={
            "candidates": len(ranked),
            "best_score": ranked[0].score if ranked else None,
        },
    )
    return ranked


def sort(
    haystacks: Iterable[str],
    needle: str,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> list[str]:
    """Order haystacks by how well they match needle, best first.

    Example:
        >>> sort(["apple", "banana", "strawberry"], "an")
        ['banana', 'apple', 'strawberry']
    """
    return [candidate.haystack for candidate in rank(haystacks, needle, config)]


def _select_best(scored: list[tuple[MatchSequence, int]]) -> tuple[MatchSequence, int]:
    ordered = sorted(scored, key=lambda pair: pair[1])
    ordered.reverse()
    return ordered[0]


def _candidate_sort_key(candidate: RankedCandidate) -> int:
    return candidate.score


__all__ = ["match", "match_with_config", "rank", "sort"]
