"""Batch G.711 operations over sample and code buffers."""
from g711codec.batch.operations import (
    alaw_encode_buffer,
    alaw_decode_buffer,
    ulaw_encode_buffer,
    ulaw_decode_buffer,
    alaw_to_ulaw_buffer,
    ulaw_to_alaw_buffer,
)

__all__ = [
    "alaw_encode_buffer",
    "alaw_decode_buffer",
    "ulaw_encode_buffer",
    "ulaw_decode_buffer",
    "alaw_to_ulaw_buffer",
    "ulaw_to_alaw_buffer",
]
