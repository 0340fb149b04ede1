"""Rich terminal renderer — gutters, inline highlights, dividers."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from linediff.diff.engine import summarize
from linediff.diff.models import (
    AddLine,
    ChangeLine,
    ContextLine,
    DiffStats,
    DividerLine,
    InlineDiffPart,
    InlineType,
    LineDiff,
    RemoveLine,
)

_ROW_STYLE = {
    "add": "green",
    "remove": "red",
    "context": "grey66",
}

_MARK_STYLE = {
    "add": "bold black on green",
    "remove": "bold black on red",
}


def edge_glyph(top: Optional[bool], bottom: Optional[bool]) -> str:
    """Border glyph for a coloured row given its edge flags."""
    if top is None or bottom is None:
        return "│"
    if top and bottom:
        return "▪"
    if top:
        return "┌"
    if bottom:
        return "└"
    return "│"


def _display(content: str) -> str:
    return content.rstrip("\r\n")


def _number(value: Optional[int], prefix: str = "") -> Text:
    if value is None:
        return Text("")
    return Text(f"{prefix}{value}", style="dim")


def inline_text(parts: Iterable[InlineDiffPart], side: str) -> Text:
    """Render one side (``add`` or ``remove``) of a change's inline diff."""
    hidden = InlineType.ADD if side == "remove" else InlineType.REMOVE
    text = Text(style=_ROW_STYLE[side])
    for part in parts:
        if part.type == hidden:
            continue
        if part.type == InlineType.UNCHANGED:
            text.append(part.value)
        else:
            text.append(part.value, style=_MARK_STYLE[side])
    return text


def _rows(line: LineDiff) -> List[List[Text]]:
    if isinstance(line, ContextLine):
        return [[
            Text(" "),
            _number(line.old_line),
            _number(line.new_line),
            Text(_display(line.content), style=_ROW_STYLE["context"]),
        ]]
    if isinstance(line, AddLine):
        return [[
            Text(edge_glyph(line.is_top_edge, line.is_bottom_edge), style="green"),
            Text(""),
            Text(f"+{line.new_line}", style="green"),
            Text(_display(line.content), style=_ROW_STYLE["add"]),
        ]]
    if isinstance(line, RemoveLine):
        return [[
            Text(edge_glyph(line.is_top_edge, line.is_bottom_edge), style="red"),
            Text(f"-{line.old_line}", style="red"),
            Text(""),
            Text(_display(line.content), style=_ROW_STYLE["remove"]),
        ]]
    if isinstance(line, ChangeLine):
        return [
            [
                Text(edge_glyph(line.remove_is_top_edge, line.remove_is_bottom_edge), style="red"),
                Text(f"-{line.old_line}", style="red"),
                Text(""),
                inline_text(line.inline_diffs, "remove"),
            ],
            [
                Text(edge_glyph(line.add_is_top_edge, line.add_is_bottom_edge), style="green"),
                Text(""),
                Text(f"+{line.new_line}", style="green"),
                inline_text(line.inline_diffs, "add"),
            ],
        ]
    if isinstance(line, DividerLine):
        label = f" {line.hidden} unchanged lines " if line.hidden else ""
        return [[Text(""), Text("┄┄┄", style="dim"), Text("┄┄┄", style="dim"), Text(f"┄┄{label}┄┄", style="dim")]]
    raise TypeError(f"unknown diff record: {line!r}")


def build_table(lines: Sequence[LineDiff], *, line_numbers: bool = True, title: Optional[str] = None) -> Table:
    """Lay the diff records out as a borderless rich table."""
    table = Table(
        title=title,
        title_style="bold",
        show_header=False,
        show_edge=False,
        box=None,
        pad_edge=False,
        padding=(0, 1),
    )
    table.add_column("edge", width=1, no_wrap=True)
    if line_numbers:
        table.add_column("old", justify="right", no_wrap=True)
        table.add_column("new", justify="right", no_wrap=True)
    table.add_column("content", no_wrap=True, overflow="fold")

    for line in lines:
        for row in _rows(line):
            if not line_numbers:
                row = [row[0], row[3]]
            table.add_row(*row)
    return table


def render(
    lines: Sequence[LineDiff],
    *,
    show_summary: bool = True,
    line_numbers: bool = True,
    title: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """Print a diff to the terminal using Rich."""
    console = console or Console()
    stats = summarize(lines)

    if not stats.has_changes:
        console.print("[bold green]✅ No differences.[/bold green]")
        if show_summary:
            _print_summary(console, stats)
        return

    console.print(build_table(lines, line_numbers=line_numbers, title=title))

    if show_summary:
        _print_summary(console, stats)


def _print_summary(console: Console, stats: DiffStats) -> None:
    console.print()
    console.print(f"[dim]Added:[/dim]    [green]{stats.added}[/green]")
    console.print(f"[dim]Removed:[/dim]  [red]{stats.removed}[/red]")
    console.print(f"[dim]Changed:[/dim]  [yellow]{stats.changed}[/yellow]")
    console.print(f"[dim]Hidden:[/dim]   {stats.hidden}")
