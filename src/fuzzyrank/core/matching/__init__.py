"""Fuzzy matching core for fuzzyrank.

This module provides the bounded alignment search, the heuristic scorer,
and the ranking engine built on top of them.
"""

from .engine import match, match_with_config, rank, sort
from .finder import find_matches, fold_case
from .models import MatchSequence, RankedCandidate, Result, ScoreBreakdown
from .scoring import score, score_breakdown

__all__ = [
    "MatchSequence",
    "RankedCandidate",
    "Result",
    "ScoreBreakdown",
    "find_matches",
    "fold_case",
    "match",
    "match_with_config",
    "rank",
    "score",
    "score_breakdown",
    "sort",
]
