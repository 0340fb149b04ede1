"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Tuple

from linediff.diff.context import CONTEXT_RADIUS

OutputFormat = Literal["terminal", "json", "yaml"]

OUTPUT_FORMATS: Tuple[str, ...] = ("terminal", "json", "yaml")


@dataclass
class DiffConfig:
    context: int = CONTEXT_RADIUS  # unchanged lines kept around each edit
    collapse: bool = True  # False = show every line, no dividers


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True
    line_numbers: bool = True


@dataclass
class LineDiffConfig:
    version: str = "1.0"
    diff: DiffConfig = field(default_factory=DiffConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
