"""Shared test fixtures — sample texts, env isolation, temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep LINEDIFF_* variables from the outer shell out of the tests."""
    for name in ("LINEDIFF_CONTEXT", "LINEDIFF_FORMAT", "LINEDIFF_NO_COLLAPSE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def ten_lines() -> str:
    """Ten distinct lines, no final newline."""
    return "\n".join(f"line {i}" for i in range(1, 11))


@pytest.fixture
def ten_lines_edited_ends(ten_lines: str) -> str:
    """``ten_lines`` with the first and last line rewritten."""
    lines = ten_lines.split("\n")
    lines[0] = "LINE 1"
    lines[-1] = "LINE 10"
    return "\n".join(lines)


@pytest.fixture
def python_before() -> str:
    return textwrap.dedent("""\
        def greet(name):
            return f"Hello, {name}!"


        def farewell(name):
            return f"Bye, {name}."
    """)


@pytest.fixture
def python_after() -> str:
    return textwrap.dedent("""\
        def greet(name, punctuation="!"):
            return f"Hello, {name}{punctuation}"


        def farewell(name):
            print("leaving")
            return f"Bye, {name}."
    """)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    subprocess.run(["git", "add", "."], cwd=tmp_path, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-m", "init"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    return tmp_path
