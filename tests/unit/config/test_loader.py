"""Tests for ConfigLoader."""

from __future__ import annotations

from pathlib import Path

import pytest

from g711codec.config import ConfigLoader, CompandingLaw, ByteOrder
from g711codec.config.default_source import DefaultConfigSource
from g711codec.exceptions import ConfigValidationError, YAMLConfigError


class TestConfigLoader:
    """Tests for merging sources with overrides."""

    def test_defaults_without_source(self) -> None:
        """Test the loader falls back to built-in defaults."""
        loader = ConfigLoader()
        assert isinstance(loader.source, DefaultConfigSource)
        options = loader.load()
        assert options.law is CompandingLaw.ALAW
        assert options.chunk_size == 4096

    def test_overrides_applied(self) -> None:
        """Test overrides replace defaults."""
        options = ConfigLoader(overrides={"law": "ulaw", "channels": 2}).load()
        assert options.law is CompandingLaw.ULAW
        assert options.channels == 2

    def test_none_overrides_ignored(self) -> None:
        """Test None overrides leave source values in place."""
        loader = ConfigLoader(overrides={"law": None, "channels": 3})
        assert loader.overrides == {"channels": 3}

    def test_yaml_values_loaded(self, write_config) -> None:
        """Test file values become options."""
        path = write_config("law: ulaw\nbyteorder: big\nsample_rate: 16000\n")
        options = ConfigLoader.from_yaml(path).load()
        assert options.law is CompandingLaw.ULAW
        assert options.byteorder is ByteOrder.BIG
        assert options.sample_rate == 16000

    def test_overrides_win_over_yaml(self, write_config) -> None:
        """Test command-line values take precedence over the file."""
        path = write_config("law: ulaw\nchunk_size: 128\n")
        options = ConfigLoader.from_yaml(path, {"law": "alaw", "chunk_size": None}).load()
        assert options.law is CompandingLaw.ALAW
        assert options.chunk_size == 128

    def test_invalid_values_reported(self, write_config) -> None:
        """Test validation errors name the source and the field."""
        path = write_config("channels: 0\n")
        with pytest.raises(ConfigValidationError, match="Invalid configuration from YAML file") as exc_info:
            ConfigLoader.from_yaml(path).load()
        assert "channels" in str(exc_info.value)
        assert exc_info.value.errors is not None

    def test_unknown_key_reported(self, write_config) -> None:
        """Test unknown keys in the file are rejected."""
        path = write_config("bitrate: 64000\n")
        with pytest.raises(ConfigValidationError, match="bitrate"):
            ConfigLoader.from_yaml(path).load()

    def test_invalid_override_reported(self) -> None:
        """Test bad overrides fail against built-in defaults."""
        with pytest.raises(ConfigValidationError, match="built-in defaults"):
            ConfigLoader(overrides={"law": "gsm"}).load()

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test from_yaml with a missing file."""
        with pytest.raises(YAMLConfigError):
            ConfigLoader.from_yaml(tmp_path / "absent.yaml")
