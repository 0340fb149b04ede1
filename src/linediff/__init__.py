"""linediff — line and word diffs of two text versions, ready to render."""

from linediff.diff import (
    AddLine,
    ChangeLine,
    ContextLine,
    DividerLine,
    InlineDiffPart,
    InlineType,
    LineDiff,
    LineType,
    RemoveLine,
    diff_lines,
    diff_lines_with_edges,
    diff_words,
)

__version__ = "0.1.0"

__all__ = [
    "AddLine",
    "ChangeLine",
    "ContextLine",
    "DividerLine",
    "InlineDiffPart",
    "InlineType",
    "LineDiff",
    "LineType",
    "RemoveLine",
    "__version__",
    "diff_lines",
    "diff_lines_with_edges",
    "diff_words",
]
