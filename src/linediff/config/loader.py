"""Load and merge configuration from .linediff.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from linediff.config.schema import OUTPUT_FORMATS, DiffConfig, LineDiffConfig, OutputConfig

CONFIG_FILENAME = ".linediff.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(directory: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = directory / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _merge_env_overrides(cfg: LineDiffConfig) -> None:
    """Apply LINEDIFF_* environment variable overrides."""
    if val := os.environ.get("LINEDIFF_CONTEXT"):
        try:
            context = int(val)
        except ValueError:
            context = -1
        if context >= 0:
            cfg.diff.context = context
    if val := os.environ.get("LINEDIFF_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if os.environ.get("LINEDIFF_NO_COLLAPSE") == "1":
        cfg.diff.collapse = False


def validate(cfg: LineDiffConfig) -> None:
    """Reject values the diff engine or the renderers cannot use."""
    if isinstance(cfg.diff.context, bool) or not isinstance(cfg.diff.context, int):
        raise ConfigError(f"diff.context must be an integer, got {cfg.diff.context!r}")
    if cfg.diff.context < 0:
        raise ConfigError(f"diff.context must be >= 0, got {cfg.diff.context}")
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"output.format must be one of {', '.join(OUTPUT_FORMATS)}, got {cfg.output.format!r}"
        )
    for name, value in (
        ("diff.collapse", cfg.diff.collapse),
        ("output.show_summary", cfg.output.show_summary),
        ("output.line_numbers", cfg.output.line_numbers),
    ):
        if not isinstance(value, bool):
            raise ConfigError(f"{name} must be true or false, got {value!r}")


def load_config(
    directory: Optional[Path] = None,
    config_override: Optional[str] = None,
) -> LineDiffConfig:
    """Load, validate, and return a LineDiffConfig."""
    config_path = find_config_file(directory or Path.cwd(), config_override)

    if config_path is None:
        cfg = LineDiffConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = LineDiffConfig(
            version=raw.get("version", "1.0"),
            diff=_build_section(raw, DiffConfig, "diff"),
            output=_build_section(raw, OutputConfig, "output"),
        )

    _merge_env_overrides(cfg)
    validate(cfg)
    return cfg
