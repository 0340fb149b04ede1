"""linediff CLI — Typer application with compare, rev, words, and init commands."""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.text import Text

from linediff import __version__

app = typer.Typer(
    name="linediff",
    help="Show what changed between two versions of a text file.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


class ReadError(Exception):
    """Raised when an input file cannot be read as text."""


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ReadError(f"No such file: {path}") from exc
    except IsADirectoryError as exc:
        raise ReadError(f"Is a directory: {path}") from exc
    except UnicodeDecodeError as exc:
        raise ReadError(f"Not a UTF-8 text file: {path}") from exc
    except OSError as exc:
        raise ReadError(f"Cannot read {path}: {exc.strerror}") from exc


def _load_settings(
    config: Optional[str],
    format: Optional[str],
    context: Optional[int],
    full: bool,
):
    """Load config, then apply CLI overrides. Exits 2 on bad values."""
    from linediff.config.loader import ConfigError, load_config
    from linediff.config.schema import OUTPUT_FORMATS

    try:
        cfg = load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    if context is not None:
        if context < 0:
            console.print(f"[bold red]Invalid context:[/bold red] {context} (must be >= 0)")
            raise typer.Exit(code=2)
        cfg.diff.context = context
    if full:
        cfg.diff.collapse = False
    return cfg


def _report(
    original: str,
    revised: str,
    cfg,
    *,
    original_label: str,
    revised_label: str,
    output: Optional[str],
    verbose: bool,
    debug: bool,
) -> None:
    """Diff two texts, print the report, and exit 1 when they differ."""
    from linediff.diff.engine import diff_lines_with_edges, summarize
    from linediff.output import json_report, terminal, yaml_report

    if verbose or debug:
        console.print(f"[dim]Original: {original_label}[/dim]")
        console.print(f"[dim]Revised:  {revised_label}[/dim]")
        console.print(f"[dim]Context:  {cfg.diff.context} (collapse={cfg.diff.collapse})[/dim]")

    start = time.perf_counter()
    lines = diff_lines_with_edges(
        original,
        revised,
        context=cfg.diff.context,
        collapse=cfg.diff.collapse,
    )
    stats = summarize(lines)
    elapsed = (time.perf_counter() - start) * 1000

    if debug:
        console.print(f"[dim]Diff duration: {elapsed:.1f}ms, {len(lines)} rows[/dim]")

    # --- Output ---
    report_text: Optional[str] = None
    labels = {"original": original_label, "revised": revised_label}

    if cfg.output.format == "terminal":
        terminal.render(
            lines,
            show_summary=cfg.output.show_summary,
            line_numbers=cfg.output.line_numbers,
            title=f"{original_label} → {revised_label}",
        )
    elif cfg.output.format == "json":
        report_text = json_report.render(lines, stats, **labels)
        print(report_text)
    elif cfg.output.format == "yaml":
        report_text = yaml_report.render(lines, stats, **labels)
        print(report_text, end="")

    # --- Write to file ---
    if output:
        if report_text is None:
            # Terminal output requested on screen; the file gets JSON
            report_text = json_report.render(lines, stats, **labels)
        Path(output).write_text(report_text, encoding="utf-8")
        if verbose:
            console.print(f"[dim]Report written to {output}[/dim]")

    # --- Exit code ---
    if stats.has_changes:
        raise typer.Exit(code=1)
    raise typer.Exit(code=0)


# ── compare ───────────────────────────────────────────────────────────────────


@app.command()
def compare(
    original: Path = typer.Argument(..., help="Original version of the file"),
    revised: Path = typer.Argument(..., help="Revised version of the file"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .linediff.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json | yaml"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write report to file"),
    context: Optional[int] = typer.Option(None, "--context", "-U", help="Unchanged lines shown around each edit"),
    full: bool = typer.Option(False, "--full", help="Show every line, never collapse"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output with timing"),
) -> None:
    """Diff two files. Exit 0 when identical, 1 when they differ, 2 on error."""
    cfg = _load_settings(config, format, context, full)

    try:
        original_text = _read_text(original)
        revised_text = _read_text(revised)
    except ReadError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    _report(
        original_text,
        revised_text,
        cfg,
        original_label=str(original),
        revised_label=str(revised),
        output=output,
        verbose=verbose,
        debug=debug,
    )


# ── rev ───────────────────────────────────────────────────────────────────────


@app.command()
def rev(
    path: Path = typer.Argument(..., help="File in a git working tree"),
    ref: str = typer.Option("HEAD", "--ref", "-r", help="Revision to compare against"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .linediff.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json | yaml"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write report to file"),
    context: Optional[int] = typer.Option(None, "--context", "-U", help="Unchanged lines shown around each edit"),
    full: bool = typer.Option(False, "--full", help="Show every line, never collapse"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output with timing"),
) -> None:
    """Diff a file as committed at --ref against its working-tree copy."""
    from linediff.git.adapter import GitError, get_repo_root, relative_to_repo, show_file

    cfg = _load_settings(config, format, context, full)

    try:
        revised_text = _read_text(path)
    except ReadError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    try:
        repo_root = get_repo_root(path.resolve().parent)
        rel_path = relative_to_repo(repo_root, path)
        original_text = show_file(repo_root, ref, rel_path)
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    _report(
        original_text,
        revised_text,
        cfg,
        original_label=f"{ref}:{rel_path}",
        revised_label=str(path),
        output=output,
        verbose=verbose,
        debug=debug,
    )


# ── words ─────────────────────────────────────────────────────────────────────


@app.command()
def words(
    old: str = typer.Argument(..., help="Original line"),
    new: str = typer.Argument(..., help="Revised line"),
    as_json: bool = typer.Option(False, "--json", help="Print the parts as JSON"),
) -> None:
    """Show the word-level diff of two single lines."""
    from linediff.diff.inline import diff_words
    from linediff.output.terminal import inline_text

    parts = diff_words(old, new)

    if as_json:
        print(json.dumps([{"type": p.type.value, "value": p.value} for p in parts], indent=2))
        return

    out = Console()
    out.print(_prefixed("-", inline_text(parts, "remove")))
    out.print(_prefixed("+", inline_text(parts, "add")))


def _prefixed(prefix: str, body: Text) -> Text:
    return Text.assemble((f"{prefix} ", body.style), body)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .linediff.toml in the current directory."""
    from linediff.config.defaults import DEFAULT_TOML
    from linediff.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"linediff {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """linediff — line and word diffs of two text versions."""
