"""Tests for the inline word differ."""

from linediff.diff.inline import diff_words, tokenize
from linediff.diff.models import InlineDiffPart, InlineType

U, A, R = InlineType.UNCHANGED, InlineType.ADD, InlineType.REMOVE


def _parts(result):
    return [(p.type, p.value) for p in result]


def _old_side(result):
    return "".join(p.value for p in result if p.type != InlineType.ADD)


def _new_side(result):
    return "".join(p.value for p in result if p.type != InlineType.REMOVE)


class TestTokenize:
    def test_words_whitespace_punctuation(self):
        assert tokenize("foo(bar, 1)") == ["foo", "(", "bar", ",", " ", "1", ")"]

    def test_whitespace_runs_stay_together(self):
        assert tokenize("a  \tb") == ["a", "  \t", "b"]


class TestDiffWords:
    def test_simple_change(self):
        assert _parts(diff_words("hello world", "hello there")) == [
            (U, "hello "),
            (R, "world"),
            (A, "there"),
        ]

    def test_identical_strings(self):
        assert diff_words("same text", "same text") == [InlineDiffPart(U, "same text")]

    def test_completely_different(self):
        assert _parts(diff_words("old", "new")) == [(R, "old"), (A, "new")]

    def test_leading_and_trailing_whitespace_unchanged(self):
        assert _parts(diff_words("  old line  ", "  new line  ")) == [
            (U, "  "),
            (R, "old"),
            (A, "new"),
            (U, " line"),
            (U, "  "),
        ]

    def test_padded_identical_strings_keep_whitespace_parts(self):
        assert _parts(diff_words("  foo  ", "  foo  ")) == [(U, "  "), (U, "foo"), (U, "  ")]

    def test_interior_whitespace_is_an_ordinary_token(self):
        assert _parts(diff_words("a b", "a  b")) == [(U, "a"), (R, " "), (A, "  "), (U, "b")]

    def test_different_indent_characters(self):
        assert _parts(diff_words("\tx", " x")) == [(R, "\t"), (A, " "), (U, "x")]

    def test_whitespace_only_lines(self):
        assert _parts(diff_words("  ", "    ")) == [(U, "  "), (A, "  ")]

    def test_empty_strings(self):
        assert diff_words("", "") == []

    def test_added_word(self):
        result = diff_words("const name = 'John'", "const name = 'John Doe'")
        assert (A, " Doe") in _parts(result)

    def test_sides_reconstruct_inputs(self):
        pairs = [
            ("  return false;", "  return true;"),
            ("def greet(name):", 'def greet(name, punctuation="!"):'),
            ("x = 1  ", "x = 2"),
            ("\t\tif a and b:", "\t\tif a or not b:"),
            ("", "new"),
            ("gone", ""),
        ]
        for old, new in pairs:
            result = diff_words(old, new)
            assert _old_side(result) == old
            assert _new_side(result) == new
