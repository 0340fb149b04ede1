"""Context collapser — keep unchanged lines only near an edit."""

from __future__ import annotations

from typing import List, Sequence

from linediff.diff.models import DividerLine, LineDiff, is_change

CONTEXT_RADIUS = 2


def retained_indices(lines: Sequence[LineDiff], radius: int = CONTEXT_RADIUS) -> List[bool]:
    """Mark each index kept when it is an edit or within *radius* of one."""
    keep = [False] * len(lines)
    for c, line in enumerate(lines):
        if not is_change(line):
            continue
        for i in range(max(0, c - radius), min(len(lines), c + radius + 1)):
            keep[i] = True
    return keep


def collapse_context(lines: Sequence[LineDiff], radius: int = CONTEXT_RADIUS) -> List[LineDiff]:
    """Drop context lines further than *radius* from any edit.

    Each maximal run of dropped records becomes one divider. A sequence with
    no edits at all is returned as is.
    """
    if radius < 0:
        raise ValueError(f"context radius must be >= 0, got {radius}")

    keep = retained_indices(lines, radius)
    if not any(keep):
        return list(lines)

    result: List[LineDiff] = []
    hidden = 0
    last_kept = 0  # 1-based position of the last retained record

    for i, line in enumerate(lines):
        if not keep[i]:
            hidden += 1
            continue
        if hidden:
            result.append(DividerLine(line=last_kept, hidden=hidden))
            hidden = 0
        result.append(line)
        last_kept = i + 1

    if hidden:
        result.append(DividerLine(line=last_kept, hidden=hidden))

    return result
