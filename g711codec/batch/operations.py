"""Batch G.711 operations over caller-supplied buffers.

Each function applies one scalar conversion element-wise from ``src`` into
``dst`` and returns the number of bytes written to ``dst``. ``src_size`` is
the number of bytes of ``src`` to consume and defaults to all of it.

Samples are machine-native signed 16-bit integers. All buffers are checked
before anything is written; a call either converts the whole span or raises
an ``InvalidBufferError`` and leaves ``dst`` untouched.
"""

from typing import SupportsIndex

import numpy as np

from g711codec.batch.buffers import byte_view, resolve_size, require_capacity
from g711codec.batch.tables import (
    alaw_encode_table,
    alaw_decode_table,
    ulaw_encode_table,
    ulaw_decode_table,
    alaw_to_ulaw_table,
    ulaw_to_alaw_table,
)
from g711codec.constants import PCM_SAMPLE_BYTES
from g711codec.exceptions import BufferSizeError
from g711codec.types import BufferLike


def _encode(table: np.ndarray, src: BufferLike, dst: BufferLike, src_size: SupportsIndex | None) -> int:
    src_bytes = byte_view(src, name="source")
    dst_bytes = byte_view(dst, name="destination", writable=True)
    nbytes = resolve_size(src_bytes, src_size, name="source")
    if nbytes % PCM_SAMPLE_BYTES:
        raise BufferSizeError(
            f"Sample input must be a whole number of 16-bit samples, got {nbytes} bytes.",
            required=nbytes + 1,
            available=nbytes,
        )

    count = nbytes // PCM_SAMPLE_BYTES
    require_capacity(dst_bytes, count)
    np.take(table, src_bytes[:nbytes].view(np.uint16), out=dst_bytes[:count])
    return count


def _decode(table: np.ndarray, src: BufferLike, dst: BufferLike, src_size: SupportsIndex | None) -> int:
    src_bytes = byte_view(src, name="source")
    dst_bytes = byte_view(dst, name="destination", writable=True)
    count = resolve_size(src_bytes, src_size, name="source")

    nbytes = count * PCM_SAMPLE_BYTES
    require_capacity(dst_bytes, nbytes)
    np.take(table, src_bytes[:count], out=dst_bytes[:nbytes].view(np.int16))
    return nbytes


def _convert(table: np.ndarray, src: BufferLike, dst: BufferLike, src_size: SupportsIndex | None) -> int:
    src_bytes = byte_view(src, name="source")
    dst_bytes = byte_view(dst, name="destination", writable=True)
    count = resolve_size(src_bytes, src_size, name="source")

    require_capacity(dst_bytes, count)
    np.take(table, src_bytes[:count], out=dst_bytes[:count])
    return count


def alaw_encode_buffer(src: BufferLike, dst: BufferLike, src_size: SupportsIndex | None = None) -> int:
    """Encode 16-bit PCM samples from ``src`` into A-law codes in ``dst``.

    Args:
        src: Native int16 samples
        dst: Writable buffer receiving one code per sample
        src_size: Bytes of ``src`` to encode; must be even

    Returns:
        int: Number of codes written (``src_size // 2``)

    Raises:
        BufferSizeError: If ``src_size`` is odd, exceeds ``src`` or ``dst`` is too small
        BufferLayoutError: If a buffer is non-contiguous or ``dst`` is read-only
    """
    return _encode(alaw_encode_table(), src, dst, src_size)


def alaw_decode_buffer(src: BufferLike, dst: BufferLike, src_size: SupportsIndex | None = None) -> int:
    """Decode A-law codes from ``src`` into 16-bit PCM samples in ``dst``.

    Args:
        src: A-law codes, one per byte
        dst: Writable buffer of at least ``2 * src_size`` bytes
        src_size: Number of codes to decode

    Returns:
        int: Number of bytes written (``2 * src_size``)
    """
    return _decode(alaw_decode_table(), src, dst, src_size)


def ulaw_encode_buffer(src: BufferLike, dst: BufferLike, src_size: SupportsIndex | None = None) -> int:
    """Encode 16-bit PCM samples from ``src`` into µ-law codes in ``dst``.

    Returns:
        int: Number of codes written (``src_size // 2``)
    """
    return _encode(ulaw_encode_table(), src, dst, src_size)


def ulaw_decode_buffer(src: BufferLike, dst: BufferLike, src_size: SupportsIndex | None = None) -> int:
    """Decode µ-law codes from ``src`` into 16-bit PCM samples in ``dst``.

    Returns:
        int: Number of bytes written (``2 * src_size``)
    """
    return _decode(ulaw_decode_table(), src, dst, src_size)


def alaw_to_ulaw_buffer(src: BufferLike, dst: BufferLike, src_size: SupportsIndex | None = None) -> int:
    """Convert A-law codes to µ-law codes; ``src`` and ``dst`` may be the same buffer."""
    return _convert(alaw_to_ulaw_table(), src, dst, src_size)


def ulaw_to_alaw_buffer(src: BufferLike, dst: BufferLike, src_size: SupportsIndex | None = None) -> int:
    """Convert µ-law codes to A-law codes; ``src`` and ``dst`` may be the same buffer."""
    return _convert(ulaw_to_alaw_table(), src, dst, src_size)
