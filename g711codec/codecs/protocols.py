"""Codec protocols for the G.711 codec."""

from typing import Protocol

import numpy as np

from g711codec.config.enums import CompandingLaw
from g711codec.types import BufferLike


class Codec(Protocol):
    """Protocol for a G.711 companding law."""

    @property
    def law(self) -> CompandingLaw:
        """Return the companding law this codec implements."""
        ...

    def encode(self, samples: BufferLike) -> np.ndarray:
        """Encode int16 samples into a new uint8 array of codes."""
        ...

    def decode(self, codes: BufferLike) -> np.ndarray:
        """Decode codes into a new int16 array of samples."""
        ...

    def encode_into(self, samples: BufferLike, out: BufferLike) -> int:
        """Encode into a caller-supplied buffer, returning the bytes written."""
        ...

    def decode_into(self, codes: BufferLike, out: BufferLike) -> int:
        """Decode into a caller-supplied buffer, returning the bytes written."""
        ...
