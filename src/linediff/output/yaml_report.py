"""YAML reporter — same document as the JSON report."""

from __future__ import annotations

from typing import Optional, Sequence

import yaml

from linediff.diff.models import DiffStats, LineDiff
from linediff.output.json_report import to_dict


def render(
    lines: Sequence[LineDiff],
    stats: Optional[DiffStats] = None,
    *,
    original: Optional[str] = None,
    revised: Optional[str] = None,
) -> str:
    """Return the report as a YAML string."""
    return yaml.safe_dump(
        to_dict(lines, stats, original=original, revised=revised),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
