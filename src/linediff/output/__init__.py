"""Renderers — rich terminal, JSON, YAML."""
