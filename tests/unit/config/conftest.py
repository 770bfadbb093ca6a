"""Config module test fixtures.

Provides fixtures for writing YAML configuration files and for
isolating tests from any config file in the real working directory.
"""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def write_config(tmp_path: Path):
    """Factory fixture writing YAML text to a config file.

    Example:
        >>> path = write_config("law: ulaw\\n")
        >>> assert path.name == "g711.yaml"
    """
    def _create(content: str, filename: str = "g711.yaml") -> Path:
        config_file = tmp_path / filename
        config_file.write_text(content, encoding="utf-8")
        return config_file

    return _create


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with tmp_path as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
