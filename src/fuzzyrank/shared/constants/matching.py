"""
Matching Engine Constants

This module contains all constants related to the match finder,
scoring weights, and ranking defaults.
"""


class ScoringDefaults:
    """Default scoring weights for the fuzzy matcher.

    Bonuses are added once per qualifying matched position (or pair of
    positions for the sequential bonus). Penalties are non-positive.
    """

    # Search bound
    MAX_RECURSION_DEPTH = 10

    # Bonuses
    SEQUENTIAL_BONUS = 30  # Adjacent matched positions
    SEPARATOR_BONUS = 30  # Match right after a space
    CAMEL_CASE_BONUS = 30  # Lowercase -> uppercase transition
    FIRST_LETTER_BONUS = 15  # Match at haystack position 0

    # Penalties
    UNMATCHED_LETTER_PENALTY = -1  # Per haystack character not matched
    LEADING_LETTER_PENALTY = -5  # Per character before the first match
    MAX_LEADING_LETTER_PENALTY = -15  # Floor for the leading penalty


class MatchingChars:
    """Characters with special meaning to the scorer."""

    SEPARATOR = " "


class ResultDefaults:
    """Values reported when no candidate alignment exists."""

    EMPTY_SCORE = 0
