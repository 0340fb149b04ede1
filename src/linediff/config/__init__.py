"""Configuration loading, schema, and defaults."""

from linediff.config.loader import ConfigError, load_config
from linediff.config.schema import OUTPUT_FORMATS, LineDiffConfig

__all__ = [
    "ConfigError",
    "LineDiffConfig",
    "OUTPUT_FORMATS",
    "load_config",
]
