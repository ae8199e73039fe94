"""Tests for the SimilarityInput adapter layer."""

import array

import pytest

import fuzzyseq as fs
from fuzzyseq.input import (
    CharacterInput,
    SequenceInput,
    SimilarityInput,
    as_input,
    as_inputs,
    register_adapter,
)


class Word:
    """A user type with no sequence interface of its own."""

    def __init__(self, letters):
        self.letters = letters


class Tokens:
    """Adapted straight to a SimilarityInput."""

    def __init__(self, *tokens):
        self.tokens = tokens


class Loop:
    """Adapter that returns the same type, which is rejected."""


register_adapter(Word, lambda w: w.letters)
register_adapter(Tokens, lambda t: SequenceInput(list(t.tokens)))
register_adapter(Loop, lambda obj: Loop())


class TestAsInput:
    """Tests for adapting operands."""

    def test_string(self):
        view = as_input("abc")
        assert isinstance(view, CharacterInput)
        assert view.length() == 3
        assert view.at(1) == "b"
        assert list(view) == ["a", "b", "c"]

    @pytest.mark.parametrize(
        "seq",
        [[1, 2, 3], (1, 2, 3), range(1, 4), b"\x01\x02\x03", bytearray(b"\x01\x02\x03"), array.array("i", [1, 2, 3])],
    )
    def test_sequences(self, seq):
        view = as_input(seq)
        assert isinstance(view, SequenceInput)
        assert view.length() == 3
        assert [view.at(i) for i in range(3)] == [1, 2, 3]

    def test_memoryview(self):
        assert as_input(memoryview(b"ab")).length() == 2

    def test_existing_input_passes_through(self):
        view = as_input("abc")
        assert as_input(view) is view

    def test_none(self):
        with pytest.raises(fs.InvalidInputError):
            as_input(None)

    def test_unsupported_type(self):
        with pytest.raises(fs.InvalidInputTypeError):
            as_input(42)
        with pytest.raises(TypeError):
            as_input(object())

    def test_mapping_rejected(self):
        with pytest.raises(fs.InvalidInputTypeError):
            as_input({"a": 1})

    def test_as_inputs_rejects_none(self):
        with pytest.raises(fs.InvalidInputError):
            as_inputs("a", None)


class TestSimilarityInputEquality:
    """Equality is by length and elements, not by backing type."""

    def test_equal_across_types(self):
        assert as_input("abc") == as_input(["a", "b", "c"])
        assert as_input([1, 2]) != as_input([1, 2, 3])
        assert as_input("abc") != as_input("abd")

    def test_hash_is_order_sensitive(self):
        assert hash(as_input("ab")) == hash(as_input(["a", "b"]))
        assert len({as_input("ab"), as_input(["a", "b"]), as_input("ba")}) == 2

    def test_not_equal_to_raw_sequence(self):
        assert as_input("abc") != "abc"

    def test_base_class_is_abstract(self):
        with pytest.raises(NotImplementedError):
            SimilarityInput().length()


class TestRegisterAdapter:
    """Tests for user-registered adapters."""

    def test_adapter_used_by_metrics(self):
        assert fs.levenshtein(Word("kitten"), Word("sitting")) == 3
        assert fs.levenshtein(Word("kitten"), "sitting") == 3

    def test_adapter_returning_input(self):
        assert fs.hamming(Tokens("a", "b"), Tokens("a", "c")) == 1

    def test_adapter_returning_same_type(self):
        with pytest.raises(fs.InvalidInputTypeError):
            as_input(Loop())

    def test_non_callable_adapter(self):
        with pytest.raises(fs.InvalidArgumentError):
            register_adapter(Word, "letters")
