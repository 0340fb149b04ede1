"""Starter .linediff.toml template."""

DEFAULT_TOML = """\
# linediff configuration
version = "1.0"

[diff]
context = 2               # unchanged lines shown around each edit
collapse = true           # false = show the whole file, no dividers

[output]
format = "terminal"       # terminal | json | yaml
show_summary = true
line_numbers = true
"""
