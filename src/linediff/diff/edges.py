"""Edge annotator — top/bottom flags for border drawing.

A renderer draws a border only where a coloured run starts or ends, so a
multi-line addition reads as one block instead of one box per row. Change
records count as a remove row and an add row at the same time.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence

from linediff.diff.models import AddLine, ChangeLine, LineDiff, LineType, RemoveLine


def is_top_edge(lines: Sequence[LineDiff], i: int, kind: LineType) -> bool:
    """True when the record at *i*, seen as *kind*, starts a visual run."""
    if i == 0:
        return True
    prev = lines[i - 1]
    if kind in (LineType.ADD, LineType.REMOVE) and prev.type == LineType.CHANGE:
        return False
    return prev.type != kind


def is_bottom_edge(lines: Sequence[LineDiff], i: int, kind: LineType) -> bool:
    """True when the record at *i*, seen as *kind*, ends a visual run."""
    if i + 1 >= len(lines):
        return True
    nxt = lines[i + 1]
    if kind == LineType.REMOVE:
        if nxt.type == LineType.CHANGE:
            return False
        return nxt.type != LineType.REMOVE
    if kind == LineType.ADD:
        # the add side of a following change is drawn after its remove row
        if nxt.type == LineType.CHANGE:
            return True
        return nxt.type != LineType.ADD
    return nxt.type != kind


def annotate_edges(lines: Sequence[LineDiff]) -> List[LineDiff]:
    """Return copies of *lines* with every edge flag filled in."""
    annotated: List[LineDiff] = []
    for i, line in enumerate(lines):
        if isinstance(line, (AddLine, RemoveLine)):
            annotated.append(
                replace(
                    line,
                    is_top_edge=is_top_edge(lines, i, line.type),
                    is_bottom_edge=is_bottom_edge(lines, i, line.type),
                )
            )
        elif isinstance(line, ChangeLine):
            annotated.append(
                replace(
                    line,
                    remove_is_top_edge=is_top_edge(lines, i, LineType.REMOVE),
                    remove_is_bottom_edge=is_bottom_edge(lines, i, LineType.REMOVE),
                    add_is_top_edge=is_top_edge(lines, i, LineType.ADD),
                    add_is_bottom_edge=is_bottom_edge(lines, i, LineType.ADD),
                )
            )
        else:
            annotated.append(line)
    return annotated
