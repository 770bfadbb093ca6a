"""Configuration loader for the G.711 codec."""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from g711codec.config.default_source import DefaultConfigSource
from g711codec.config.models import TranscodeOptions
from g711codec.config.protocols import ConfigSource
from g711codec.config.yaml_source import YAMLConfigSource
from g711codec.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Merge a configuration source with command-line overrides.

    Values from the source are applied first; overrides that are not None
    replace them. The merged mapping is validated into TranscodeOptions.
    """

    def __init__(self, source: ConfigSource | None = None, overrides: dict[str, Any] | None = None) -> None:
        """Initialize the configuration loader.

        Args:
            source: Where file-level options come from (built-in defaults if None)
            overrides: Option values from the command line; None entries are ignored
        """
        self.source = source or DefaultConfigSource()
        self.overrides = {k: v for k, v in (overrides or {}).items() if v is not None}

    @classmethod
    def from_yaml(cls, config_path: Path, overrides: dict[str, Any] | None = None) -> "ConfigLoader":
        """Create a loader reading options from a YAML file."""
        return cls(YAMLConfigSource(config_path), overrides)

    def load(self) -> TranscodeOptions:
        """Return validated transcoding options.

        Raises:
            ConfigValidationError: If the merged options are invalid
        """
        data, schema_version = self.source.load()
        logger.debug(f"Loaded options from {self.source.source_description} (schema v{schema_version})")

        merged = {**data, **self.overrides}
        try:
            return TranscodeOptions(**merged)
        except ValidationError as e:
            raise ConfigValidationError(
                f"Invalid configuration from {self.source.source_description}: "
                + "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors()),
                errors=e,
            ) from e
