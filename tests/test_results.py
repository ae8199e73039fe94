"""Tests for the immutable result value types."""

import dataclasses

import pytest

import fuzzyseq as fs
from fuzzyseq import IntersectionResult, LevenshteinResults, MatchResult, OverlapResult


class TestLevenshteinResults:
    """Tests for LevenshteinResults."""

    def test_str(self):
        result = LevenshteinResults(7, 0, 3, 4)
        assert str(result) == "Distance: 7, Insert: 0, Delete: 3, Substitute: 4"

    def test_equality_and_hash(self):
        a = LevenshteinResults(1, 0, 1, 0)
        b = LevenshteinResults(1, 0, 1, 0)
        c = LevenshteinResults(1, 1, 0, 0)
        assert a == b
        assert hash(a) == hash(b)
        assert a != c
        assert len({a, b, c}) == 2

    def test_immutable(self):
        result = LevenshteinResults(1, 1, 0, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.distance = 2

    def test_sentinel(self):
        result = LevenshteinResults(-1)
        assert result.exceeded_threshold
        assert (result.insert_count, result.delete_count, result.substitute_count) == (0, 0, 0)

    @pytest.mark.parametrize("args", [(-2, 0, 0, 0), (1, -1, 0, 0), (1, 0, -1, 0), (1, 0, 0, -1)])
    def test_invalid(self, args):
        with pytest.raises(fs.InvalidArgumentError):
            LevenshteinResults(*args)

    @pytest.mark.parametrize("args", [(5, 1, 1, 1), (2, 0, 0, 1), (0, 1, 0, 0)])
    def test_counts_must_sum_to_distance(self, args):
        with pytest.raises(fs.InvalidArgumentError, match="sum to"):
            LevenshteinResults(*args)

    @pytest.mark.parametrize("args", [(-1, 2, 0, 0), (-1, 0, 1, 0), (-1, 0, 0, 1)])
    def test_sentinel_has_no_counts(self, args):
        with pytest.raises(fs.InvalidArgumentError):
            LevenshteinResults(*args)


class TestIntersectionResult:
    """Tests for IntersectionResult."""

    def test_derived_values(self):
        result = IntersectionResult(5, 5, 3)
        assert result.union == 7
        assert result.jaccard_index == 3 / 7
        assert result.sorensen_dice_coefficient == 0.6
        assert result.f1_score == 0.6

    def test_accessors_are_idempotent(self):
        result = IntersectionResult(8, 5, 2)
        assert result.jaccard_index == result.jaccard_index
        assert result.f1_score == result.f1_score

    def test_empty(self):
        result = IntersectionResult(0, 0, 0)
        assert result.union == 0
        assert result.jaccard_index == 0.0
        assert result.sorensen_dice_coefficient == 0.0

    def test_large_sizes_do_not_overflow(self):
        big = 2**31 - 1
        result = IntersectionResult(big, big, big)
        assert result.union == big
        assert result.jaccard_index == 1.0

    def test_str(self):
        assert str(IntersectionResult(4, 3, 3)) == "Size A: 4, Size B: 3, Intersection: 3"

    @pytest.mark.parametrize("args", [(-1, 2, 0), (2, -1, 0), (2, 3, -1), (2, 3, 3)])
    def test_invalid(self, args):
        with pytest.raises(fs.InvalidArgumentError):
            IntersectionResult(*args)

    def test_equality(self):
        assert IntersectionResult(1, 2, 1) == IntersectionResult(1, 2, 1)
        assert IntersectionResult(1, 2, 1) != IntersectionResult(2, 1, 1)


class TestOverlapResult:
    """Tests for OverlapResult."""

    def test_derived_values(self):
        result = OverlapResult(4, 3, 3)
        assert result.union == 4
        assert result.jaccard_index == 0.75
        assert result.sorensen_dice_coefficient == 6 / 7

    def test_distinct_from_intersection_result(self):
        assert OverlapResult(4, 3, 3) != IntersectionResult(4, 3, 3)

    def test_invalid(self):
        with pytest.raises(fs.InvalidArgumentError):
            OverlapResult(1, 1, 2)


class TestMatchResult:
    """Tests for MatchResult."""

    def test_fields(self):
        match = MatchResult("apple", 0.9, 2)
        assert (match.text, match.score, match.id) == ("apple", 0.9, 2)
        assert MatchResult("apple", 0.9).id is None
        assert hash(match) == hash(MatchResult("apple", 0.9, 2))
