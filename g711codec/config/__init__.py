"""Configuration package for the G.711 codec."""

# Re-export enums
from g711codec.config.enums import CompandingLaw, ByteOrder

# Re-export models
from g711codec.config.models import TranscodeOptions

# Re-export loading
from g711codec.config.loader import ConfigLoader
from g711codec.config.resolver import ConfigResolver
from g711codec.config.generator import ConfigGenerator

__all__ = [
    # Enums
    "CompandingLaw",
    "ByteOrder",
    # Models
    "TranscodeOptions",
    # Loading
    "ConfigLoader",
    "ConfigResolver",
    "ConfigGenerator",
]
