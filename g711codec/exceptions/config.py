"""Configuration-related exceptions for the G.711 codec."""

from pydantic import ValidationError

from g711codec.exceptions.base import G711Error


class ConfigError(G711Error):
    """Base class for user-facing configuration errors."""


class ConfigValidationError(ConfigError):
    """Raised when Pydantic validation fails for user data.

    This exception is raised when transcoding options from a configuration
    file or the command line fail validation due to incorrect data types,
    unknown keys or constraint violations defined in the Pydantic models.
    """

    def __init__(self, message: str, *, errors: ValidationError | None = None) -> None:
        super().__init__(message)
        self.errors = errors


class YAMLConfigError(ConfigValidationError):
    """Exception raised for YAML configuration file errors.

    This includes:
    - File not found
    - YAML parsing errors
    - Invalid structure (not a mapping, wrong types)
    - Unsupported schema version
    """
    pass
