"""CLI utility functions for the G.711 codec."""
from __future__ import annotations

from pathlib import Path
from typing import Any

from g711codec.config import ConfigLoader, ConfigResolver, TranscodeOptions


def _sanitize_path(path: Path) -> Path:
    """Return a normalized, absolute version of ``path``."""

    return path.expanduser().resolve()


def _load_options(config: Path | None, **overrides: Any) -> TranscodeOptions:
    """Resolve the configuration file and merge command-line overrides into it.

    Raises:
        FileNotFoundError: If an explicit ``config`` path does not exist
        ConfigError: If the merged options are invalid
    """
    explicit = _sanitize_path(config) if config is not None else None
    config_path = ConfigResolver(explicit).resolve()
    if config_path is None:
        return ConfigLoader(overrides=overrides).load()
    return ConfigLoader.from_yaml(config_path, overrides).load()


def _ensure_distinct(input_path: Path, output_path: Path) -> None:
    """Refuse to overwrite the input file with its own output."""

    if _sanitize_path(input_path) == _sanitize_path(output_path):
        raise ValueError(f"Output path must differ from input path: {input_path}")
