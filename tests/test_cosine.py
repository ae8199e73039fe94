"""Tests for cosine similarity, cosine distance and the regex tokenizer."""

from collections import Counter

import pytest

import fuzzyseq as fs
from fuzzyseq import CosineDistance, CosineSimilarity, RegexTokenizer


class TestRegexTokenizer:
    """Tests for splitting text into word tokens."""

    def test_tokens(self):
        assert RegexTokenizer().tokenize("the house, da house") == ["the", "house", "da", "house"]

    def test_custom_pattern(self):
        assert RegexTokenizer(r"[a-z]").tokenize("ab1c") == ["a", "b", "c"]

    @pytest.mark.parametrize("text", [None, "", "   ", "\t\n"])
    def test_blank_text_rejected(self, text):
        with pytest.raises(fs.InvalidInputError):
            RegexTokenizer().tokenize(text)


class TestCosineVectors:
    """Tests for cosine_similarity over explicit count vectors."""

    def test_no_shared_features(self):
        sim = CosineSimilarity().cosine_similarity({"3J/75": 1}, {"-2": 1})
        assert sim == 0.0

    def test_zero_vector(self):
        vector = {"a": 0}
        assert CosineSimilarity().cosine_similarity(vector, vector) == 0.0
        assert CosineSimilarity().cosine_similarity({}, {"a": 1}) == 0.0

    def test_identical_vectors(self):
        vector = {"a": 2, "b": 3}
        assert CosineSimilarity().cosine_similarity(vector, vector) == pytest.approx(1.0)

    def test_partial_overlap(self):
        sim = CosineSimilarity().cosine_similarity(Counter("aab"), Counter("ab"))
        # dot = 2*1 + 1*1, |l| = sqrt(5), |r| = sqrt(2)
        assert sim == pytest.approx(3 / (5 ** 0.5 * 2 ** 0.5))

    def test_none_vector(self):
        with pytest.raises(fs.InvalidInputError):
            CosineSimilarity().cosine_similarity(None, {"a": 1})


class TestCosineText:
    """Tests for tokenized text comparison."""

    @pytest.mark.parametrize(
        "left,right,expected",
        [
            ("the house", "da house", 0.5),
            ("AB", "AB", 0.0),
            ("AB", "BA", 1.0),
        ],
    )
    def test_distance(self, left, right, expected):
        assert CosineDistance().apply(left, right) == pytest.approx(expected)

    def test_long_texts(self):
        left = "the boy was from tamana shi, kumamoto ken, and the girl was from rio de janeiro, rio"
        right = (
            "the boy was from tamana shi, kumamoto, and the boy was from rio de janeiro, rio de janeiro"
        )
        assert round(CosineDistance().apply(left, right), 2) == 0.08

    def test_similarity_and_distance_agree(self):
        sim = fs.cosine_similarity("the cat sat", "the cat ran")
        assert sim == pytest.approx(2 / 3)
        assert fs.cosine_distance("the cat sat", "the cat ran") == pytest.approx(1 / 3)

    def test_custom_tokenizer(self):
        metric = CosineSimilarity(tokenizer=list)
        assert metric.apply("ab", "ba") == pytest.approx(1.0)

    def test_non_callable_tokenizer(self):
        with pytest.raises(fs.InvalidArgumentError):
            CosineSimilarity(tokenizer="words")

    @pytest.mark.parametrize("left,right", [(None, "a"), ("a", None), ("", "a"), ("a", "  ")])
    def test_invalid_text(self, left, right):
        with pytest.raises(fs.InvalidInputError):
            CosineSimilarity().apply(left, right)
