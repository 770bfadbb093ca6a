"""Scalar domain exceptions for the G.711 codec."""

from g711codec.exceptions.base import G711Error


class SampleRangeError(G711Error, ValueError):
    """Raised when a linear sample lies outside the signed 16-bit range."""

    def __init__(self, sample: int) -> None:
        super().__init__(f"PCM sample {sample} is outside the signed 16-bit range [-32768, 32767].")
        self.sample = sample


class CodeRangeError(G711Error, ValueError):
    """Raised when a companded code lies outside the unsigned 8-bit range."""

    def __init__(self, code: int) -> None:
        super().__init__(f"G.711 code {code} is outside the unsigned 8-bit range [0, 255].")
        self.code = code
