"""JSON reporter for scripted consumers."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Dict, List, Optional, Sequence

from linediff.diff.engine import summarize
from linediff.diff.models import ChangeLine, DiffStats, LineDiff

REPORT_VERSION = "1.0"


def line_to_dict(line: LineDiff) -> Dict[str, Any]:
    """Convert one diff record to a JSON-serialisable dict tagged by ``type``."""
    data: Dict[str, Any] = {"type": line.type.value}
    for f in dataclasses.fields(line):
        data[f.name] = getattr(line, f.name)
    if isinstance(line, ChangeLine):
        data["inline_diffs"] = [
            {"type": part.type.value, "value": part.value} for part in line.inline_diffs
        ]
    return data


def stats_to_dict(stats: DiffStats) -> Dict[str, Any]:
    return {
        "added": stats.added,
        "removed": stats.removed,
        "changed": stats.changed,
        "context": stats.context,
        "hidden": stats.hidden,
        "dividers": stats.dividers,
        "has_changes": stats.has_changes,
    }


def to_dict(
    lines: Sequence[LineDiff],
    stats: Optional[DiffStats] = None,
    *,
    original: Optional[str] = None,
    revised: Optional[str] = None,
) -> Dict[str, Any]:
    """Build the report document for *lines*."""
    if stats is None:
        stats = summarize(lines)
    records: List[Dict[str, Any]] = [line_to_dict(line) for line in lines]
    return {
        "version": REPORT_VERSION,
        **({"original": original} if original else {}),
        **({"revised": revised} if revised else {}),
        "stats": stats_to_dict(stats),
        "lines": records,
    }


def render(
    lines: Sequence[LineDiff],
    stats: Optional[DiffStats] = None,
    *,
    original: Optional[str] = None,
    revised: Optional[str] = None,
) -> str:
    """Return formatted JSON string."""
    return json.dumps(
        to_dict(lines, stats, original=original, revised=revised),
        indent=2,
        ensure_ascii=False,
    )
