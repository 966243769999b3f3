"""
fuzzyrank - Fuzzy search-as-you-type ranking

Scores how well a short query (the needle) matches a longer candidate
(the haystack) and orders candidate lists by that score, favouring
contiguous, word-start and camelCase matches.

    >>> import fuzzyrank
    >>> fuzzyrank.match("cars", "classic cars").matches
    (8, 9, 10, 11)
    >>> fuzzyrank.sort(["apple", "banana", "strawberry"], "an")
    ['banana', 'apple', 'strawberry']
"""

__version__ = "0.1.0"

from .config.models.scoring_config import DEFAULT_SCORING_CONFIG, ScoringConfig
from .core.matching import RankedCandidate, Result, match, match_with_config, rank, sort

__all__ = [
    "DEFAULT_SCORING_CONFIG",
    "RankedCandidate",
    "Result",
    "ScoringConfig",
    "match",
    "match_with_config",
    "rank",
    "sort",
]
