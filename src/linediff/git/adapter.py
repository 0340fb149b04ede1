"""Git subprocess wrapper — repo root and file contents at a revision."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""


def _run_git(args: list[str], cwd: Path, timeout: int = 30) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        stderr = result.stderr.strip() or f"exit status {result.returncode}"
        raise GitError(f"git error: {stderr}")
    return result.stdout


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the current git repository."""
    cwd = cwd or Path.cwd()
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    return Path(out.strip())


def relative_to_repo(repo_root: Path, path: Path) -> str:
    """Return *path* as a forward-slash path relative to *repo_root*."""
    try:
        rel = path.resolve().relative_to(repo_root.resolve())
    except ValueError as exc:
        raise GitError(f"{path} is outside the repository at {repo_root}") from exc
    return rel.as_posix()


def show_file(repo_root: Path, ref: str, path: str) -> str:
    """Return the content of *path* as committed at *ref*."""
    return _run_git(["show", f"{ref}:{path}"], cwd=repo_root)
