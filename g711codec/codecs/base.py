"""Shared implementation of the allocating codec helpers."""

from collections.abc import Callable
from typing import SupportsIndex, TypeAlias

import numpy as np

from g711codec.batch.buffers import byte_view, coerce_samples, coerce_codes
from g711codec.constants import PCM_SAMPLE_BYTES
from g711codec.types import BufferLike

BufferOperation: TypeAlias = Callable[[BufferLike, BufferLike, SupportsIndex | None], int]


class BufferCodec:
    """Codec built from a pair of batch buffer operations.

    Subclasses name the two operations; this class owns the allocation of
    output arrays, which the batch functions never do themselves.
    """

    _encode_buffer: BufferOperation
    _decode_buffer: BufferOperation

    def encode(self, samples: BufferLike) -> np.ndarray:
        samples = coerce_samples(samples)
        nbytes = byte_view(samples, name="source").size
        out = np.empty(nbytes // PCM_SAMPLE_BYTES, dtype=np.uint8)
        self.encode_into(samples, out)
        return out

    def decode(self, codes: BufferLike) -> np.ndarray:
        codes = coerce_codes(codes)
        out = np.empty(byte_view(codes, name="source").size, dtype=np.int16)
        self.decode_into(codes, out)
        return out

    def encode_into(self, samples: BufferLike, out: BufferLike) -> int:
        return type(self)._encode_buffer(coerce_samples(samples), out, None)

    def decode_into(self, codes: BufferLike, out: BufferLike) -> int:
        return type(self)._decode_buffer(coerce_codes(codes), out, None)
