"""Tests for the ranking engine and public matching API."""

import pytest

import fuzzyrank
from fuzzyrank.config.models.scoring_config import ScoringConfig
from fuzzyrank.core.matching.engine import match, match_with_config, rank, sort
from fuzzyrank.core.matching.models import RankedCandidate, Result


class TestMatch:
    """Test cases for single needle/haystack matching."""

    def test_prefers_contiguous_word_start(self):
        result = match("cars", "classic cars")
        assert result == Result(score=97, matches=(8, 9, 10, 11))

    def test_empty_needle(self):
        result = match("", "anything")
        assert result.score == 0
        assert result.matches == ()

    def test_empty_haystack(self):
        assert match("abc", "") == Result.empty()

    def test_no_shared_characters(self):
        assert match("q", "abc") == Result.empty()

    def test_case_insensitive(self):
        upper = match("ABC", "xabcx")
        lower = match("abc", "xabcx")
        assert upper.score == lower.score
        assert upper.matches == lower.matches == (1, 2, 3)

    @pytest.mark.parametrize("text", ["a", "abc", "Hello World", "fooBarBaz"])
    def test_self_match_is_full_run(self, text):
        result = match(text, text)
        assert result.matches == tuple(range(len(text)))

    @pytest.mark.parametrize("text", ["a", "abc", "hello"])
    def test_extra_unmatchable_character_lowers_score(self, text):
        assert match(text, text).score > match(text, text + "z").score

    def test_camel_case_boundary(self):
        assert match("fb", "FooBar") == Result(score=41, matches=(0, 3))

    def test_partial_match_is_scored(self):
        """A needle longer than any alignment still gets its best prefix."""
        result = match("an", "apple")
        assert result == Result(score=11, matches=(0,))


class TestMatchWithConfig:
    """Test cases for caller-supplied configuration."""

    def test_config_weights_are_used_for_scoring(self):
        config = ScoringConfig(sequential_bonus=100)
        result = match_with_config(config, "cars", "classic cars")
        assert result == Result(score=307, matches=(8, 9, 10, 11))

    def test_config_depth_limits_search(self):
        config = ScoringConfig(max_recursion_depth=1)
        result = match_with_config(config, "cars", "classic cars")
        assert result == Result(score=37, matches=(0, 2, 10, 11))

    def test_zero_depth_finds_nothing(self):
        config = ScoringConfig(max_recursion_depth=0)
        assert match_with_config(config, "a", "a") == Result.empty()

    def test_tie_goes_to_last_generated(self, flat_config):
        """Candidates (0,) and (1,) both score 0; the later one wins."""
        assert match_with_config(flat_config, "a", "aa") == Result(score=0, matches=(1,))

    def test_default_config_prefers_first_letter(self, default_config):
        assert match_with_config(default_config, "a", "aa") == Result(score=14, matches=(0,))


class TestSortAndRank:
    """Test cases for ordering candidate lists."""

    def test_sort_fruit(self, fruit):
        assert sort(fruit, "an") == [
            "banana",
            "orange",
            "apple",
            "pear",
            "pineapple",
            "strawberry",
        ]

    def test_contiguous_matches_rank_above_missing_subsequence(self, fruit):
        ordered = sort(fruit, "an")
        assert ordered.index("banana") < ordered.index("strawberry")
        assert ordered.index("orange") < ordered.index("strawberry")

    def test_ties_come_out_in_reverse_input_order(self):
        assert sort(["xa", "ya", "za"], "a") == ["za", "ya", "xa"]

    def test_ties_keep_reverse_order_among_other_scores(self):
        assert sort(["xa", "a", "ya"], "a") == ["a", "ya", "xa"]

    def test_empty_input(self):
        assert sort([], "a") == []
        assert rank([], "a") == []

    def test_accepts_any_iterable(self):
        assert sort(iter(["apple", "banana"]), "an") == ["banana", "apple"]

    def test_rank_keeps_results(self, fruit):
        ranked = rank(fruit, "an")

        assert all(isinstance(candidate, RankedCandidate) for candidate in ranked)
        assert [candidate.score for candidate in ranked] == [21, 16, 11, -13, -23, -24]
        assert ranked[0] == RankedCandidate("banana", Result(21, (1, 2)))

    def test_rank_with_config(self):
        config = ScoringConfig(first_letter_bonus=100)
        assert sort(["ba", "ab"], "a", config) == ["ab", "ba"]

        position_blind = ScoringConfig(
            first_letter_bonus=0,
            leading_letter_penalty=0,
            max_leading_letter_penalty=0,
        )
        assert sort(["ab", "ba"], "a", position_blind) == ["ba", "ab"]

    def test_sort_matches_rank_order(self, fruit):
        assert sort(fruit, "ap") == [candidate.haystack for candidate in rank(fruit, "ap")]


class TestPackageExports:
    """Test the top-level package API."""

    def test_top_level_functions(self, fruit):
        assert fuzzyrank.match("cars", "classic cars").score == 97
        assert fuzzyrank.sort(fruit, "an")[0] == "banana"
        assert fuzzyrank.DEFAULT_SCORING_CONFIG == fuzzyrank.ScoringConfig()
