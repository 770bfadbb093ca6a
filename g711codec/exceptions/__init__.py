"""Exception hierarchy for the G.711 codec."""
from g711codec.exceptions.base import G711Error
from g711codec.exceptions.codec import SampleRangeError, CodeRangeError
from g711codec.exceptions.buffer import (
    InvalidBufferError,
    BufferSizeError,
    BufferLayoutError,
)
from g711codec.exceptions.config import (
    ConfigError,
    ConfigValidationError,
    YAMLConfigError,
)
from g711codec.exceptions.audio import AudioFileError

__all__ = [
    "G711Error",
    "SampleRangeError",
    "CodeRangeError",
    "InvalidBufferError",
    "BufferSizeError",
    "BufferLayoutError",
    "ConfigError",
    "ConfigValidationError",
    "YAMLConfigError",
    "AudioFileError",
]
