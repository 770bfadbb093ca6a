"""Buffer views and size checks for batch operations."""

import operator
from typing import SupportsIndex

import numpy as np

from g711codec.constants import PCM_MIN, PCM_MAX, CODE_MIN, CODE_MAX
from g711codec.exceptions import (
    BufferLayoutError,
    BufferSizeError,
    SampleRangeError,
    CodeRangeError,
)
from g711codec.types import BufferLike


def byte_view(buffer: BufferLike, *, name: str, writable: bool = False) -> np.ndarray:
    """Return a flat ``uint8`` view over ``buffer`` without copying.

    Args:
        buffer: NumPy array or any object exporting the buffer protocol
        name: Buffer role used in error messages ("source", "destination")
        writable: Whether the view must accept writes

    Returns:
        np.ndarray: 1-D uint8 array sharing memory with ``buffer``

    Raises:
        BufferLayoutError: If the buffer is non-contiguous, not a buffer,
            or read-only when ``writable`` is requested
    """
    if isinstance(buffer, np.ndarray) and not buffer.flags.c_contiguous:
        raise BufferLayoutError(f"The {name} array must be C-contiguous.")
    try:
        if isinstance(buffer, np.ndarray):
            view = buffer.reshape(-1).view(np.uint8)
        else:
            view = np.frombuffer(buffer, dtype=np.uint8)
    except (TypeError, ValueError, BufferError) as e:
        raise BufferLayoutError(f"The {name} does not expose a contiguous byte buffer: {e}") from e

    if writable and not view.flags.writeable:
        raise BufferLayoutError(f"The {name} buffer is read-only.")
    return view


def resolve_size(view: np.ndarray, size: SupportsIndex | None, *, name: str) -> int:
    """Return the number of bytes of ``view`` a batch call should consume.

    Raises:
        BufferSizeError: If ``size`` is negative or exceeds the buffer
    """
    if size is None:
        return view.size
    nbytes = operator.index(size)
    if nbytes < 0:
        raise BufferSizeError(f"The {name} length must not be negative, got {nbytes}.", required=nbytes)
    if nbytes > view.size:
        raise BufferSizeError(
            f"The {name} length of {nbytes} bytes exceeds its buffer ({view.size} bytes).",
            required=nbytes,
            available=view.size,
        )
    return nbytes


def require_capacity(view: np.ndarray, required: int, *, name: str = "destination") -> None:
    """Ensure ``view`` can hold ``required`` bytes of output.

    Raises:
        BufferSizeError: If the buffer is too small
    """
    if view.size < required:
        raise BufferSizeError(
            f"The {name} buffer holds {view.size} bytes but {required} are required.",
            required=required,
            available=view.size,
        )


def coerce_samples(samples: BufferLike) -> BufferLike:
    """Return ``samples`` as int16 data, range-checking wider integer arrays.

    Raw buffers are passed through unchanged and read as native int16.
    Arrays come back C-contiguous, copied only when they are strided.
    """
    if not isinstance(samples, np.ndarray):
        return samples
    if samples.dtype == np.int16:
        return np.ascontiguousarray(samples)
    if not np.issubdtype(samples.dtype, np.integer):
        raise BufferLayoutError(f"PCM samples must be integers, got dtype {samples.dtype}.")
    if samples.size:
        lowest, highest = int(samples.min()), int(samples.max())
        if lowest < PCM_MIN:
            raise SampleRangeError(lowest)
        if highest > PCM_MAX:
            raise SampleRangeError(highest)
    return np.ascontiguousarray(samples, dtype=np.int16)


def coerce_codes(codes: BufferLike) -> BufferLike:
    """Return ``codes`` as uint8 data, range-checking wider integer arrays."""
    if not isinstance(codes, np.ndarray):
        return codes
    if codes.dtype == np.uint8:
        return np.ascontiguousarray(codes)
    if not np.issubdtype(codes.dtype, np.integer):
        raise BufferLayoutError(f"G.711 codes must be integers, got dtype {codes.dtype}.")
    if codes.size:
        lowest, highest = int(codes.min()), int(codes.max())
        if lowest < CODE_MIN:
            raise CodeRangeError(lowest)
        if highest > CODE_MAX:
            raise CodeRangeError(highest)
    return np.ascontiguousarray(codes, dtype=np.uint8)
