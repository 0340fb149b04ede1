"""Raw line matcher — Myers shortest edit script grouped into blocks.

The same edit-script routine drives the word-level differ, so it works on
any two sequences of hashable items.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, List, Sequence, Tuple, TypeVar

T = TypeVar("T")


class BlockKind(str, Enum):
    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class RawBlock:
    """A run of consecutive lines sharing one edit kind."""

    kind: BlockKind
    lines: Tuple[str, ...]


Edit = Tuple[BlockKind, T]


def split_lines(text: str) -> List[str]:
    """Split *text* on ``\\n`` keeping each terminator.

    A final terminator does not produce a trailing empty line, so joining
    the result always gives back *text*.
    """
    if not text:
        return []
    lines = [line + "\n" for line in text.split("\n")]
    lines[-1] = lines[-1][:-1]
    if lines[-1] == "":
        lines.pop()
    return lines


class Myers(Generic[T]):
    """Shortest edit script between two sequences in linear space.

    Common leading and trailing items are matched first. What remains is
    split at the middle snake of its edit graph and both halves are solved
    recursively, so only two ``V`` vectors are alive at any time.
    """

    def __init__(self, a: Sequence[T], b: Sequence[T]) -> None:
        self.a = a
        self.b = b

    @classmethod
    def diff(cls, a: Sequence[T], b: Sequence[T]) -> List[Edit]:
        return cls(a, b)._diff()

    def _diff(self) -> List[Edit]:
        edits: List[Edit] = []
        self._walk(0, len(self.a), 0, len(self.b), edits)
        return edits

    def _walk(self, a_lo: int, a_hi: int, b_lo: int, b_hi: int, edits: List[Edit]) -> None:
        a, b = self.a, self.b

        # --- Common prefix ---
        while a_lo < a_hi and b_lo < b_hi and a[a_lo] == b[b_lo]:
            edits.append((BlockKind.EQUAL, a[a_lo]))
            a_lo += 1
            b_lo += 1

        # --- Common suffix ---
        tail = 0
        while a_lo < a_hi - tail and b_lo < b_hi - tail and a[a_hi - 1 - tail] == b[b_hi - 1 - tail]:
            tail += 1
        a_hi -= tail
        b_hi -= tail

        if a_lo == a_hi or b_lo == b_hi or not set(a[a_lo:a_hi]).intersection(b[b_lo:b_hi]):
            # Nothing left in common: the only shortest script removes and re-adds everything
            edits.extend((BlockKind.DELETE, item) for item in a[a_lo:a_hi])
            edits.extend((BlockKind.INSERT, item) for item in b[b_lo:b_hi])
        else:
            x0, y0, x1, y1 = self._middle_snake(a_lo, a_hi, b_lo, b_hi)
            self._walk(a_lo, a_lo + x0, b_lo, b_lo + y0, edits)
            edits.extend((BlockKind.EQUAL, item) for item in a[a_lo + x0:a_lo + x1])
            self._walk(a_lo + x1, a_hi, b_lo + y1, b_hi, edits)

        edits.extend((BlockKind.EQUAL, item) for item in a[a_hi:a_hi + tail])

    def _middle_snake(self, a_lo: int, a_hi: int, b_lo: int, b_hi: int) -> Tuple[int, int, int, int]:
        """Return the middle snake ``(x0, y0, x1, y1)`` relative to the slice origin.

        The forward search runs from the top-left corner, the backward one
        from the bottom-right corner in reversed coordinates. Both advance
        one edit per round until their furthest-reaching paths overlap.
        """
        a, b = self.a, self.b
        n, m = a_hi - a_lo, b_hi - b_lo
        delta = n - m
        odd = delta % 2 == 1
        offset = n + m + 1
        forward = [0] * (2 * offset + 1)
        backward = [0] * (2 * offset + 1)

        for d in range((n + m + 1) // 2 + 1):
            for k in range(-d, d + 1, 2):
                if k == -d or (k != d and forward[offset + k - 1] < forward[offset + k + 1]):
                    x = forward[offset + k + 1]
                else:
                    x = forward[offset + k - 1] + 1
                y = x - k
                start_x, start_y = x, y

                while x < n and y < m and a[a_lo + x] == b[b_lo + y]:
                    x += 1
                    y += 1

                forward[offset + k] = x

                if odd and delta - (d - 1) <= k <= delta + (d - 1):
                    if x + backward[offset + delta - k] >= n:
                        return start_x, start_y, x, y

            for k in range(-d, d + 1, 2):
                if k == -d or (k != d and backward[offset + k - 1] < backward[offset + k + 1]):
                    x = backward[offset + k + 1]
                else:
                    x = backward[offset + k - 1] + 1
                y = x - k
                start_x, start_y = x, y

                while x < n and y < m and a[a_hi - 1 - x] == b[b_hi - 1 - y]:
                    x += 1
                    y += 1

                backward[offset + k] = x

                if not odd and -d <= delta - k <= d:
                    if x + forward[offset + delta - k] >= n:
                        return n - x, m - y, n - start_x, m - start_y

        raise AssertionError("edit graph has no middle snake")


def shortest_edit(a: Sequence[T], b: Sequence[T]) -> List[Edit]:
    """Return the edit script turning *a* into *b*.

    Inside every run of non-equal edits all deletes come before all inserts,
    which is what lets the pairer treat a delete run followed by an insert
    run as modified lines.
    """
    edits = Myers.diff(a, b)
    ordered: List[Edit] = []
    deletes: List[Edit] = []
    inserts: List[Edit] = []

    for edit in edits:
        if edit[0] == BlockKind.EQUAL:
            ordered.extend(deletes)
            ordered.extend(inserts)
            deletes.clear()
            inserts.clear()
            ordered.append(edit)
        elif edit[0] == BlockKind.DELETE:
            deletes.append(edit)
        else:
            inserts.append(edit)

    ordered.extend(deletes)
    ordered.extend(inserts)
    return ordered


def group_edits(edits: Sequence[Edit]) -> List[Tuple[BlockKind, List[T]]]:
    """Collapse consecutive edits of the same kind into ``(kind, items)`` runs."""
    runs: List[Tuple[BlockKind, List[T]]] = []
    for kind, item in edits:
        if runs and runs[-1][0] == kind:
            runs[-1][1].append(item)
        else:
            runs.append((kind, [item]))
    return runs


def match_lines(original: str, revised: str) -> List[RawBlock]:
    """Align the lines of *original* and *revised* into raw blocks.

    Replaying delete + equal blocks gives back *original*; replaying
    equal + insert blocks gives back *revised*.
    """
    edits = shortest_edit(split_lines(original), split_lines(revised))
    return [RawBlock(kind=kind, lines=tuple(items)) for kind, items in group_edits(edits)]
