"""Inline word differ for modified lines.

Shared leading and trailing whitespace is reported as unchanged on its own,
so indentation and trailing padding never light up as an edit. Everything in
between is diffed token by token.
"""

from __future__ import annotations

import re
from typing import List, Tuple

from linediff.diff.matcher import BlockKind, group_edits, shortest_edit
from linediff.diff.models import InlineDiffPart, InlineType

_TOKEN_RE = re.compile(r"\s+|\w+|[^\w\s]")

_KIND_TO_TYPE = {
    BlockKind.EQUAL: InlineType.UNCHANGED,
    BlockKind.INSERT: InlineType.ADD,
    BlockKind.DELETE: InlineType.REMOVE,
}


def tokenize(text: str) -> List[str]:
    """Split *text* into word, whitespace-run and punctuation tokens."""
    return _TOKEN_RE.findall(text)


def _common_whitespace(old: str, new: str) -> Tuple[str, str]:
    """Return the shared (leading, trailing) whitespace runs.

    The trailing run is measured on what is left after the leading run so
    the two never overlap.
    """
    limit = min(len(old), len(new))
    lead = 0
    while lead < limit and old[lead] == new[lead] and old[lead].isspace():
        lead += 1

    limit -= lead
    trail = 0
    while (
        trail < limit
        and old[-1 - trail] == new[-1 - trail]
        and old[-1 - trail].isspace()
    ):
        trail += 1

    return old[:lead], (old[len(old) - trail:] if trail else "")


def _diff_core(old: str, new: str) -> List[InlineDiffPart]:
    edits = shortest_edit(tokenize(old), tokenize(new))
    return [
        InlineDiffPart(type=_KIND_TO_TYPE[kind], value="".join(tokens))
        for kind, tokens in group_edits(edits)
    ]


def diff_words(old_line: str, new_line: str) -> List[InlineDiffPart]:
    """Word-level diff of two lines.

    Joining every part except ``add`` gives *old_line*; joining every part
    except ``remove`` gives *new_line*.
    """
    lead, trail = _common_whitespace(old_line, new_line)
    end = len(trail)
    old_core = old_line[len(lead):len(old_line) - end]
    new_core = new_line[len(lead):len(new_line) - end]

    parts: List[InlineDiffPart] = []
    if lead:
        parts.append(InlineDiffPart(InlineType.UNCHANGED, lead))
    parts.extend(_diff_core(old_core, new_core))
    if trail:
        parts.append(InlineDiffPart(InlineType.UNCHANGED, trail))
    return parts
