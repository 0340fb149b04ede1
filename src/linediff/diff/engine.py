"""Diff engine — runs the matcher, pairer, collapser and annotator in order."""

from __future__ import annotations

from typing import List, Sequence

from linediff.diff.context import CONTEXT_RADIUS, collapse_context
from linediff.diff.edges import annotate_edges
from linediff.diff.inline import diff_words
from linediff.diff.matcher import match_lines
from linediff.diff.models import (
    AddLine,
    ChangeLine,
    ContextLine,
    DiffStats,
    DividerLine,
    LineDiff,
    RemoveLine,
)
from linediff.diff.pairing import pair_blocks

__all__ = ["diff_lines", "diff_lines_with_edges", "diff_words", "summarize"]


def _check_text(name: str, value: object) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, not {type(value).__name__}")


def diff_lines(
    original: str,
    revised: str,
    *,
    context: int = CONTEXT_RADIUS,
    collapse: bool = True,
) -> List[LineDiff]:
    """Line diff of two texts with unchanged lines collapsed.

    Context lines further than *context* from any edit are replaced by
    dividers; pass ``collapse=False`` to keep every line.
    """
    _check_text("original", original)
    _check_text("revised", revised)

    lines = pair_blocks(match_lines(original, revised))
    if not collapse:
        return lines
    return collapse_context(lines, context)


def diff_lines_with_edges(
    original: str,
    revised: str,
    *,
    context: int = CONTEXT_RADIUS,
    collapse: bool = True,
) -> List[LineDiff]:
    """Same as :func:`diff_lines`, with border edge flags filled in."""
    return annotate_edges(diff_lines(original, revised, context=context, collapse=collapse))


def summarize(lines: Sequence[LineDiff]) -> DiffStats:
    """Count the records of a diff by kind."""
    stats = DiffStats()
    for line in lines:
        if isinstance(line, AddLine):
            stats.added += 1
        elif isinstance(line, RemoveLine):
            stats.removed += 1
        elif isinstance(line, ChangeLine):
            stats.changed += 1
        elif isinstance(line, ContextLine):
            stats.context += 1
        elif isinstance(line, DividerLine):
            stats.dividers += 1
            stats.hidden += line.hidden
    return stats
