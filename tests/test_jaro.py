"""Tests for Jaro and Jaro-Winkler similarity algorithms.

This module tests the Jaro-Winkler similarity and distance metrics, including
parameter validation and the prefix boost cut-off.
"""

import pytest

import fuzzyseq as fs
from fuzzyseq import JaroWinklerDistance, JaroWinklerSimilarity
from fuzzyseq.input import as_input
from fuzzyseq.jaro import matches


class TestJaro:
    """Tests for Jaro and Jaro-Winkler similarity."""

    def test_jaro_identical(self):
        assert fs.jaro_similarity("hello", "hello") == 1.0
        assert fs.jaro_similarity("", "") == 1.0

    def test_jaro_different(self):
        assert fs.jaro_similarity("abc", "xyz") == 0.0
        assert fs.jaro_similarity("", "a") == 0.0

    def test_jaro_classic_examples(self):
        # Classic MARTHA/MARHTA example
        sim = fs.jaro_similarity("MARTHA", "MARHTA")
        assert 0.94 < sim < 0.95

    def test_jaro_winkler_prefix_boost(self):
        jaro = fs.jaro_similarity("MARTHA", "MARHTA")
        jaro_winkler = fs.jaro_winkler_similarity("MARTHA", "MARHTA")
        # Jaro-Winkler should be higher due to common prefix
        assert jaro_winkler > jaro
        assert jaro_winkler == pytest.approx(0.961111, abs=1e-6)

    def test_jaro_winkler_params(self):
        default = fs.jaro_winkler_similarity("prefix_test", "prefix_best")
        higher = fs.jaro_winkler_similarity("prefix_test", "prefix_best", scaling_factor=0.2)
        assert higher >= default


class TestJaroWinklerReferenceValues:
    """Known values for the default scaling factor and boost cut-off."""

    @pytest.mark.parametrize(
        "left,right,expected",
        [
            ("", "", 1.0),
            ("foo", "foo", 1.0),
            ("foo", "foo ", 0.94166),
            ("foo", "foo  ", 0.90666),
            ("foo", " foo ", 0.86666),
            ("foo", "  foo", 0.51111),
            ("frog", "fog", 0.925),
            ("fly", "ant", 0.0),
            ("elephant", "hippo", 0.44166),
            ("hippo", "elephant", 0.44166),
            ("hippo", "zzzzzzzz", 0.0),
            ("hello", "hallo", 0.88),
            ("ABC Corporation", "ABC Corp", 0.90666),
            ("D N H Enterprises Inc", "D & H Enterprises, Inc.", 0.95251),
            ("PENNSYLVANIA", "PENNCISYLVNIA", 0.898018),
            ("/opt/software1", "/opt/software2", 0.971428),
            ("aaabcd", "aaacdb", 0.941666),
            ("John Horn", "John Hopkins", 0.91111),
        ],
    )
    def test_values(self, left, right, expected):
        assert JaroWinklerSimilarity().apply(left, right) == pytest.approx(expected, abs=1e-5)

    def test_distance_is_complement(self):
        for left, right in [("frog", "fog"), ("hello", "hallo"), ("", "")]:
            similarity = JaroWinklerSimilarity().apply(left, right)
            assert JaroWinklerDistance().apply(left, right) == pytest.approx(1.0 - similarity)
        assert fs.jaro_winkler_distance("frog", "fog") == pytest.approx(0.075, abs=1e-5)


class TestBoostThreshold:
    """The prefix boost applies only from the configured Jaro score upwards."""

    def test_below_cutoff_has_no_boost(self):
        # Jaro("foo", "  foo") is below 0.7, so the shared prefix is ignored
        assert fs.jaro_winkler_similarity("foo", "  foo") == fs.jaro_similarity("foo", "  foo")

    def test_unconditional_boost(self):
        metric = JaroWinklerSimilarity(boost_threshold=0.0)
        jaro = fs.jaro_similarity("abcxyz", "abqrst")
        assert jaro < 0.7
        assert metric.apply("abcxyz", "abqrst") == pytest.approx(jaro + 0.1 * 2 * (1 - jaro))

    def test_zero_scaling_factor_is_jaro(self):
        metric = JaroWinklerSimilarity(scaling_factor=0.0)
        assert metric.apply("MARTHA", "MARHTA") == fs.jaro_similarity("MARTHA", "MARHTA")


class TestMatches:
    """Tests for the match/transposition/prefix triple."""

    def test_transposed_pair(self):
        assert matches(as_input("MARTHA"), as_input("MARHTA")) == (6, 2, 3)

    def test_prefix_is_capped(self):
        assert matches(as_input("abcdefg"), as_input("abcdefh"))[2] == 4

    def test_no_matches(self):
        assert matches(as_input("abc"), as_input("xyz")) == (0, 0, 0)


class TestJaroWinklerValidation:
    """Tests for argument validation."""

    @pytest.mark.parametrize("factor", [-0.1, 0.26, 1.0])
    def test_scaling_factor_out_of_range(self, factor):
        with pytest.raises(fs.InvalidArgumentError):
            JaroWinklerSimilarity(scaling_factor=factor)

    def test_boost_threshold_out_of_range(self):
        with pytest.raises(fs.InvalidArgumentError):
            JaroWinklerSimilarity(boost_threshold=1.5)

    def test_none_input(self):
        with pytest.raises(fs.InvalidInputError):
            JaroWinklerSimilarity().apply(None, "abc")
        with pytest.raises(fs.InvalidInputError):
            JaroWinklerDistance().apply("abc", None)

    def test_element_sequences(self):
        assert JaroWinklerSimilarity().apply([1, 2, 3], [1, 2, 3]) == 1.0
        assert JaroWinklerSimilarity().apply([1, 2, 3], [4, 5, 6]) == 0.0
