"""Change block pairer — raw blocks to typed line records.

A delete block immediately followed by an insert block is read as lines
edited in place: the two runs are zipped position by position into change
records, and whatever is left over on the longer side becomes plain removes
or adds.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from linediff.diff.inline import diff_words
from linediff.diff.matcher import BlockKind, RawBlock
from linediff.diff.models import AddLine, ChangeLine, ContextLine, LineDiff, RemoveLine


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def make_change_line(old_content: str, new_content: str, old_line: int, new_line: int) -> ChangeLine:
    """Build a change record with its inline word diff."""
    return ChangeLine(
        old_content=old_content,
        new_content=new_content,
        old_line=old_line,
        new_line=new_line,
        inline_diffs=tuple(diff_words(_strip_newline(old_content), _strip_newline(new_content))),
    )


def pair_removed_added(
    removed: Sequence[str],
    added: Sequence[str],
    old_line: int,
    new_line: int,
) -> Tuple[List[LineDiff], int, int]:
    """Zip a delete run with the insert run that follows it.

    Returns the records plus the advanced ``(old_line, new_line)`` counters.
    """
    diffs: List[LineDiff] = []
    for j in range(max(len(removed), len(added))):
        old_content: Optional[str] = removed[j] if j < len(removed) else None
        new_content: Optional[str] = added[j] if j < len(added) else None

        if old_content is not None and new_content is not None:
            diffs.append(make_change_line(old_content, new_content, old_line, new_line))
            old_line += 1
            new_line += 1
        elif old_content is not None:
            diffs.append(RemoveLine(content=old_content, old_line=old_line))
            old_line += 1
        else:
            assert new_content is not None
            diffs.append(AddLine(content=new_content, new_line=new_line))
            new_line += 1

    return diffs, old_line, new_line


def pair_blocks(blocks: Sequence[RawBlock]) -> List[LineDiff]:
    """Convert raw matcher blocks into context/add/remove/change records."""
    result: List[LineDiff] = []
    old_line = 1
    new_line = 1
    idx = 0
    total = len(blocks)

    while idx < total:
        block = blocks[idx]
        following = blocks[idx + 1] if idx + 1 < total else None

        # --- delete + insert → edited lines ---
        if block.kind == BlockKind.DELETE and following is not None and following.kind == BlockKind.INSERT:
            start_old, start_new = old_line, new_line
            diffs, old_line, new_line = pair_removed_added(block.lines, following.lines, old_line, new_line)
            assert old_line - start_old == len(block.lines)
            assert new_line - start_new == len(following.lines)
            result.extend(diffs)
            idx += 2
            continue

        if block.kind == BlockKind.INSERT:
            for line in block.lines:
                result.append(AddLine(content=line, new_line=new_line))
                new_line += 1
        elif block.kind == BlockKind.DELETE:
            for line in block.lines:
                result.append(RemoveLine(content=line, old_line=old_line))
                old_line += 1
        else:
            for line in block.lines:
                result.append(ContextLine(content=line, old_line=old_line, new_line=new_line))
                old_line += 1
                new_line += 1

        idx += 1

    return result
