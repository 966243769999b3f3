"""Matching Engine Domain Models.

This module defines immutable domain models for the matcher's outputs.
These models use frozen dataclasses for immutability and performance.
"""

from __future__ import annotations

from dataclasses import dataclass

from fuzzyrank.shared.constants import ResultDefaults

# Strictly increasing haystack positions, one per matched needle character
MatchSequence = tuple[int, ...]


@dataclass(frozen=True)
class Result:
    """Best alignment of a needle inside a haystack, with its score.

    Attributes:
        score: Integer quality score (higher is better, may be negative)
        matches: Haystack code-point positions used by the alignment

    Example:
        >>> result = Result(score=97, matches=(8, 9, 10, 11))
        >>> result.matches
        (8, 9, 10, 11)

    Raises:
        ValueError: If matches contains a negative position or is not
                    strictly increasing
    """

    score: int
    matches: MatchSequence = ()

    def __post_init__(self) -> None:
        """Normalize matches to a tuple and validate ordering.

        Raises:
            ValueError: If a position is negative or positions do not increase
        """
        matches = tuple(self.matches)
        object.__setattr__(self, "matches", matches)

        if matches and matches[0] < 0:
            msg = f"Match positions must be non-negative, got {matches[0]}"
            raise ValueError(msg)

        for previous, current in zip(matches, matches[1:]):
            if current <= previous:
                msg = (
                    f"Match positions must be strictly increasing, "
                    f"got {current} after {previous}"
                )
                raise ValueError(msg)

    @classmethod
    def empty(cls) -> Result:
        """Result reported when no candidate alignment exists."""
        return cls(score=ResultDefaults.EMPTY_SCORE, matches=())

    @property
    def matched(self) -> bool:
        return bool(self.matches)


@dataclass(frozen=True)
class RankedCandidate:
    """A haystack together with its match result, as produced by rank()."""

    haystack: str
    result: Result

    @property
    def score(self) -> int:
        return self.result.score


@dataclass(frozen=True)
class ScoreBreakdown:
    """The individual terms that sum to a match score.

    Attributes:
        leading: Leading-letter penalty (floored)
        unmatched: Unmatched-letter penalty
        first_letter: First-letter bonus
        sequential: Adjacent-position bonus
        separator: After-space bonus
        camel_case: Lowercase-to-uppercase bonus
    """

    leading: int
    unmatched: int
    first_letter: int
    sequential: int
    separator: int
    camel_case: int

    @property
    def total(self) -> int:
        return (
            self.leading
            + self.unmatched
            + self.first_letter
            + self.sequential
            + self.separator
            + self.camel_case
        )

    def as_dict(self) -> dict[str, int]:
        return {
            "leading": self.leading,
            "unmatched": self.unmatched,
            "first_letter": self.first_letter,
            "sequential": self.sequential,
            "separator": self.separator,
            "camel_case": self.camel_case,
            "total": self.total,
        }


__all__ = ["MatchSequence", "RankedCandidate", "Result", "ScoreBreakdown"]
