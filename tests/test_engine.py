"""End-to-end tests for diff_lines / diff_lines_with_edges / diff_words."""

import pytest

from linediff import diff_lines, diff_lines_with_edges, diff_words
from linediff.diff.engine import summarize
from linediff.diff.models import (
    AddLine,
    ChangeLine,
    ContextLine,
    DividerLine,
    InlineDiffPart,
    InlineType,
    RemoveLine,
)


def _old_text(lines):
    out = []
    for line in lines:
        if isinstance(line, (ContextLine, RemoveLine)):
            out.append(line.content)
        elif isinstance(line, ChangeLine):
            out.append(line.old_content)
    return "".join(out)


def _new_text(lines):
    out = []
    for line in lines:
        if isinstance(line, (ContextLine, AddLine)):
            out.append(line.content)
        elif isinstance(line, ChangeLine):
            out.append(line.new_content)
    return "".join(out)


class TestCoreBehaviour:
    def test_identity(self):
        text = "alpha\nbeta\ngamma\n"
        result = diff_lines(text, text)
        assert all(isinstance(r, ContextLine) for r in result)
        assert len(result) == 3
        assert all(r.old_line == r.new_line for r in result)

    def test_identity_never_collapses(self, ten_lines):
        result = diff_lines(ten_lines, ten_lines)
        assert len(result) == 10
        assert not any(isinstance(r, DividerLine) for r in result)

    def test_added_line(self):
        assert diff_lines("line1\nline3", "line1\nline2\nline3") == [
            ContextLine(content="line1\n", old_line=1, new_line=1),
            AddLine(content="line2\n", new_line=2),
            ContextLine(content="line3", old_line=2, new_line=3),
        ]

    def test_removed_line(self):
        assert diff_lines("line1\nline2\nline3", "line1\nline3") == [
            ContextLine(content="line1\n", old_line=1, new_line=1),
            RemoveLine(content="line2\n", old_line=2),
            ContextLine(content="line3", old_line=3, new_line=2),
        ]

    def test_modified_line_is_paired(self):
        result = diff_lines("line1\nold line\nline3", "line1\nnew line\nline3")
        assert result == [
            ContextLine(content="line1\n", old_line=1, new_line=1),
            ChangeLine(
                old_content="old line\n",
                new_content="new line\n",
                old_line=2,
                new_line=2,
                inline_diffs=(
                    InlineDiffPart(InlineType.REMOVE, "old"),
                    InlineDiffPart(InlineType.ADD, "new"),
                    InlineDiffPart(InlineType.UNCHANGED, " line"),
                ),
            ),
            ContextLine(content="line3", old_line=3, new_line=3),
        ]

    def test_whitespace_only_change_is_a_change(self):
        result = diff_lines("line1\nline2", "line1\n  line2  ")
        assert len(result) == 2
        assert result[0] == ContextLine(content="line1\n", old_line=1, new_line=1)
        assert isinstance(result[1], ChangeLine)
        assert "line2" in result[1].old_content
        assert "line2" in result[1].new_content

    def test_preserves_whitespace_in_context(self):
        text = "  line1  \n  line2  \n"
        assert diff_lines(text, text) == [
            ContextLine(content="  line1  \n", old_line=1, new_line=1),
            ContextLine(content="  line2  \n", old_line=2, new_line=2),
        ]


class TestEdgeCases:
    def test_two_empty_strings(self):
        assert diff_lines("", "") == []

    def test_pure_insertion(self):
        assert diff_lines("", "new line") == [AddLine(content="new line", new_line=1)]

    def test_pure_deletion(self):
        assert diff_lines("old line", "") == [RemoveLine(content="old line", old_line=1)]

    def test_non_string_input_rejected(self):
        with pytest.raises(TypeError):
            diff_lines(None, "x")  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            diff_lines_with_edges("x", b"x")  # type: ignore[arg-type]


class TestInvariants:
    PAIRS = [
        ("a\nb\nc", "a\nB\nc\nd"),
        ("one\ntwo\nthree\n", "zero\none\nthree\nfour\n"),
        ("x", "y"),
        ("", "p\nq\n"),
        ("p\nq\n", ""),
    ]

    def test_round_trip_without_collapsing(self, python_before, python_after):
        for original, revised in self.PAIRS + [(python_before, python_after)]:
            result = diff_lines(original, revised, collapse=False)
            assert _old_text(result) == original
            assert _new_text(result) == revised

    def test_round_trip_small_inputs_default(self):
        for original, revised in self.PAIRS:
            result = diff_lines(original, revised)
            assert not any(isinstance(r, DividerLine) for r in result)
            assert _old_text(result) == original
            assert _new_text(result) == revised

    def test_line_numbers_strictly_increase(self, python_before, python_after):
        result = diff_lines(python_before, python_after, collapse=False)
        old_numbers = [r.old_line for r in result if hasattr(r, "old_line")]
        new_numbers = [r.new_line for r in result if hasattr(r, "new_line")]
        assert old_numbers == list(range(1, len(old_numbers) + 1))
        assert new_numbers == list(range(1, len(new_numbers) + 1))


class TestCollapsing:
    def test_changes_at_both_ends(self, ten_lines, ten_lines_edited_ends):
        result = diff_lines(ten_lines, ten_lines_edited_ends)
        assert sum(isinstance(r, DividerLine) for r in result) == 1
        assert sum(isinstance(r, ChangeLine) for r in result) == 2
        assert len(result) == 7
        assert result[3] == DividerLine(line=3, hidden=4)

    def test_custom_context(self, ten_lines, ten_lines_edited_ends):
        result = diff_lines(ten_lines, ten_lines_edited_ends, context=0)
        assert [type(r) for r in result] == [ChangeLine, DividerLine, ChangeLine]
        assert result[1] == DividerLine(line=1, hidden=8)

    def test_collapse_disabled(self, ten_lines, ten_lines_edited_ends):
        result = diff_lines(ten_lines, ten_lines_edited_ends, collapse=False)
        assert len(result) == 10


class TestWithEdges:
    def test_plain_diff_has_no_edges(self):
        result = diff_lines("", "a\nb\nc")
        assert all(r.is_top_edge is None for r in result)

    def test_insertion_edges(self):
        result = diff_lines_with_edges("", "a\nb\nc")
        assert [r.is_top_edge for r in result] == [True, False, False]
        assert [r.is_bottom_edge for r in result] == [False, False, True]

    def test_change_edges_filled(self):
        result = diff_lines_with_edges("a\nold\nc", "a\nnew\nc")
        change = result[1]
        assert isinstance(change, ChangeLine)
        assert change.remove_is_top_edge is True
        assert change.add_is_bottom_edge is True


class TestDiffWordsExport:
    def test_exposed_at_top_level(self):
        assert diff_words("  old line  ", "  new line  ") == [
            InlineDiffPart(InlineType.UNCHANGED, "  "),
            InlineDiffPart(InlineType.REMOVE, "old"),
            InlineDiffPart(InlineType.ADD, "new"),
            InlineDiffPart(InlineType.UNCHANGED, " line"),
            InlineDiffPart(InlineType.UNCHANGED, "  "),
        ]


class TestSummarize:
    def test_counts(self, ten_lines, ten_lines_edited_ends):
        stats = summarize(diff_lines(ten_lines, ten_lines_edited_ends))
        assert stats.changed == 2
        assert stats.context == 4
        assert stats.hidden == 4
        assert stats.dividers == 1
        assert stats.has_changes is True

    def test_identical_has_no_changes(self):
        stats = summarize(diff_lines("a\n", "a\n"))
        assert stats.has_changes is False
        assert stats.context == 1
