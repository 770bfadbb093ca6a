"""Batch buffer exceptions for the G.711 codec."""

from g711codec.exceptions.base import G711Error


class InvalidBufferError(G711Error, ValueError):
    """Raised when a batch operation is given buffers it cannot safely use.

    Batch operations validate every buffer before writing any output, so
    this exception always means the destination buffer is untouched.
    """


class BufferSizeError(InvalidBufferError):
    """Raised when a stated length does not fit the buffers supplied.

    This covers:
    - a source length that is negative or exceeds the source buffer
    - an odd byte length for 16-bit sample input
    - a destination buffer too small for the output
    """

    def __init__(self, message: str, *, required: int | None = None, available: int | None = None) -> None:
        super().__init__(message)
        self.required = required
        self.available = available


class BufferLayoutError(InvalidBufferError):
    """Raised when a buffer is read-only, non-contiguous or not a buffer at all."""
