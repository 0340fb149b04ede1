"""Data models for line and word diffs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class LineType(str, Enum):
    CONTEXT = "context"
    ADD = "add"
    REMOVE = "remove"
    CHANGE = "change"
    DIVIDER = "divider"


class InlineType(str, Enum):
    UNCHANGED = "unchanged"
    ADD = "add"
    REMOVE = "remove"


@dataclass(frozen=True, slots=True)
class InlineDiffPart:
    """A word-level fragment of a changed line."""

    type: InlineType
    value: str


@dataclass(frozen=True, slots=True)
class ContextLine:
    """A line present, unchanged, in both versions."""

    content: str
    old_line: int
    new_line: int

    @property
    def type(self) -> LineType:
        return LineType.CONTEXT


@dataclass(frozen=True, slots=True)
class AddLine:
    """A line present only in the revised text."""

    content: str
    new_line: int
    is_top_edge: Optional[bool] = None
    is_bottom_edge: Optional[bool] = None

    @property
    def type(self) -> LineType:
        return LineType.ADD


@dataclass(frozen=True, slots=True)
class RemoveLine:
    """A line present only in the original text."""

    content: str
    old_line: int
    is_top_edge: Optional[bool] = None
    is_bottom_edge: Optional[bool] = None

    @property
    def type(self) -> LineType:
        return LineType.REMOVE


@dataclass(frozen=True, slots=True)
class ChangeLine:
    """A line modified in place.

    Consumes one line from each side and carries its own word-level diff.
    Edge flags are set per side because the row renders as a remove row
    followed by an add row.
    """

    old_content: str
    new_content: str
    old_line: int
    new_line: int
    inline_diffs: tuple[InlineDiffPart, ...] = ()
    remove_is_top_edge: Optional[bool] = None
    remove_is_bottom_edge: Optional[bool] = None
    add_is_top_edge: Optional[bool] = None
    add_is_bottom_edge: Optional[bool] = None

    @property
    def type(self) -> LineType:
        return LineType.CHANGE


@dataclass(frozen=True, slots=True)
class DividerLine:
    """Placeholder for a collapsed run of context lines.

    ``line`` is the 1-based position of the last retained record before the
    gap in the uncollapsed sequence (0 when the gap opens the file).
    """

    line: int
    hidden: int = 0

    @property
    def type(self) -> LineType:
        return LineType.DIVIDER


LineDiff = Union[ContextLine, AddLine, RemoveLine, ChangeLine, DividerLine]

CHANGE_TYPES = (AddLine, RemoveLine, ChangeLine)


def is_change(line: LineDiff) -> bool:
    """True for records that represent an edit (add, remove or change)."""
    return isinstance(line, CHANGE_TYPES)


@dataclass
class DiffStats:
    """Row counts for a computed diff."""

    added: int = 0
    removed: int = 0
    changed: int = 0
    context: int = 0
    hidden: int = 0
    dividers: int = 0

    @property
    def has_changes(self) -> bool:
        return bool(self.added or self.removed or self.changed)
