"""ITU-T G.711 A-law and µ-law companding.

Scalar conversions work on single samples and codes; the ``*_buffer``
functions apply them across caller-supplied buffers.
"""
from g711codec.constants import VERSION
from g711codec.scalar import (
    alaw_encode,
    alaw_decode,
    ulaw_encode,
    ulaw_decode,
    alaw_to_ulaw,
    ulaw_to_alaw,
)
from g711codec.batch import (
    alaw_encode_buffer,
    alaw_decode_buffer,
    ulaw_encode_buffer,
    ulaw_decode_buffer,
    alaw_to_ulaw_buffer,
    ulaw_to_alaw_buffer,
)
from g711codec.codecs import Codec, ALawCodec, ULawCodec, get_codec, transcode, transcode_into
from g711codec.config import CompandingLaw
from g711codec.exceptions import G711Error, InvalidBufferError, BufferSizeError, BufferLayoutError

__version__ = VERSION

__all__ = [
    # Scalar
    "alaw_encode",
    "alaw_decode",
    "ulaw_encode",
    "ulaw_decode",
    "alaw_to_ulaw",
    "ulaw_to_alaw",
    # Batch
    "alaw_encode_buffer",
    "alaw_decode_buffer",
    "ulaw_encode_buffer",
    "ulaw_decode_buffer",
    "alaw_to_ulaw_buffer",
    "ulaw_to_alaw_buffer",
    # Codec objects
    "Codec",
    "ALawCodec",
    "ULawCodec",
    "get_codec",
    "transcode",
    "transcode_into",
    "CompandingLaw",
    # Errors
    "G711Error",
    "InvalidBufferError",
    "BufferSizeError",
    "BufferLayoutError",
]
