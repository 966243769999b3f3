"""Scoring configuration model.

This module defines the ScoringConfig model that holds every tunable
weight of the fuzzy matcher in a single, immutable, type-safe place.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from fuzzyrank.shared.constants import ScoringDefaults


class ScoringConfig(BaseModel):
    """Fuzzy matching search bound and scoring weights.

    Instances are frozen; derive variants with ``model_copy(update=...)``
    instead of mutating a shared instance.

    Attributes:
        max_recursion_depth: How many times the search may fork to look for
                             a better alignment. Default: 10
        sequential_bonus: Added for each pair of adjacent matched positions.
                          Default: 30
        separator_bonus: Added for each match directly after a space.
                         Default: 30
        camel_case_bonus: Added for each match on a lowercase-to-uppercase
                          transition. Default: 30
        first_letter_bonus: Added when the first haystack character matches.
                            Default: 15
        unmatched_letter_penalty: Applied per haystack character not used by
                                  the match. Default: -1
        leading_letter_penalty: Applied per haystack character before the
                                first match. Default: -5
        max_leading_letter_penalty: Floor of the total leading penalty.
                                    Default: -15

    Example:
        >>> config = ScoringConfig()
        >>> config.sequential_bonus
        30
        >>> config.model_copy(update={"sequential_bonus": 50}).sequential_bonus
        50
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Search bound
    max_recursion_depth: int = Field(
        default=ScoringDefaults.MAX_RECURSION_DEPTH,
        ge=0,
        description="Maximum number of alternative-alignment forks per search path",
    )

    # Bonuses
    sequential_bonus: int = Field(
        default=ScoringDefaults.SEQUENTIAL_BONUS,
        ge=0,
        description="Bonus for each pair of adjacent matched positions",
    )
    separator_bonus: int = Field(
        default=ScoringDefaults.SEPARATOR_BONUS,
        ge=0,
        description="Bonus for each match directly after a space",
    )
    camel_case_bonus: int = Field(
        default=ScoringDefaults.CAMEL_CASE_BONUS,
        ge=0,
        description="Bonus for each match on a lowercase-to-uppercase transition",
    )
    first_letter_bonus: int = Field(
        default=ScoringDefaults.FIRST_LETTER_BONUS,
        ge=0,
        description="Bonus when the match starts at the first haystack character",
    )

    # Penalties
    unmatched_letter_penalty: int = Field(
        default=ScoringDefaults.UNMATCHED_LETTER_PENALTY,
        le=0,
        description="Penalty per haystack character not part of the match",
    )
    leading_letter_penalty: int = Field(
        default=ScoringDefaults.LEADING_LETTER_PENALTY,
        le=0,
        description="Penalty per haystack character before the first match",
    )
    max_leading_letter_penalty: int = Field(
        default=ScoringDefaults.MAX_LEADING_LETTER_PENALTY,
        le=0,
        description="Floor of the total leading penalty",
    )


DEFAULT_SCORING_CONFIG = ScoringConfig()


__all__ = ["DEFAULT_SCORING_CONFIG", "ScoringConfig"]
