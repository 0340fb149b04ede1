"""Diff pipeline — matcher, pairer, inline differ, collapser, annotator."""

from linediff.diff.context import CONTEXT_RADIUS, collapse_context
from linediff.diff.edges import annotate_edges
from linediff.diff.engine import diff_lines, diff_lines_with_edges, summarize
from linediff.diff.inline import diff_words
from linediff.diff.matcher import BlockKind, RawBlock, match_lines, split_lines
from linediff.diff.models import (
    AddLine,
    ChangeLine,
    ContextLine,
    DiffStats,
    DividerLine,
    InlineDiffPart,
    InlineType,
    LineDiff,
    LineType,
    RemoveLine,
)
from linediff.diff.pairing import pair_blocks

__all__ = [
    "AddLine",
    "BlockKind",
    "CONTEXT_RADIUS",
    "ChangeLine",
    "ContextLine",
    "DiffStats",
    "DividerLine",
    "InlineDiffPart",
    "InlineType",
    "LineDiff",
    "LineType",
    "RawBlock",
    "RemoveLine",
    "annotate_edges",
    "collapse_context",
    "diff_lines",
    "diff_lines_with_edges",
    "diff_words",
    "match_lines",
    "pair_blocks",
    "split_lines",
    "summarize",
]
