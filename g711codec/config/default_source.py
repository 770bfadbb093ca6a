"""Default configuration source for the G.711 codec."""

from typing import Any

from g711codec.config.protocols import CURRENT_SCHEMA_VERSION


class DefaultConfigSource:
    """Provide the built-in defaults, i.e. no options beyond the model's own."""

    @property
    def source_description(self) -> str:
        """Human-readable description of the config source."""
        return "built-in defaults"

    def load(self) -> tuple[dict[str, Any], int]:
        return {}, CURRENT_SCHEMA_VERSION
