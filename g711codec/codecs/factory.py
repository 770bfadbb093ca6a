"""Factory functions for G.711 codecs."""

from typing import cast

import numpy as np

from g711codec.batch import alaw_to_ulaw_buffer, ulaw_to_alaw_buffer
from g711codec.batch.buffers import byte_view, coerce_codes, require_capacity
from g711codec.codecs.alaw import ALawCodec
from g711codec.codecs.protocols import Codec
from g711codec.codecs.ulaw import ULawCodec
from g711codec.config.enums import CompandingLaw
from g711codec.types import BufferLike


def _as_law(law: CompandingLaw | str) -> CompandingLaw:
    if isinstance(law, CompandingLaw):
        return law
    return CompandingLaw.parse(law)


def get_codec(law: CompandingLaw | str) -> Codec:
    """Factory function to get the codec for the given companding law.

    Args:
        law: The companding law, as an enum member or a name such as "ulaw"

    Returns:
        Codec: The codec instance

    Raises:
        ValueError: If ``law`` names no G.711 law
    """
    codecs = {
        CompandingLaw.ALAW: ALawCodec(),
        CompandingLaw.ULAW: ULawCodec(),
    }
    return cast(Codec, codecs[_as_law(law)])


def transcode_into(
    codes: BufferLike,
    out: BufferLike,
    source: CompandingLaw | str,
    target: CompandingLaw | str,
) -> int:
    """Convert codes of law ``source`` into ``out`` as law ``target``.

    Returns:
        int: Number of codes written

    Raises:
        InvalidBufferError: If ``out`` cannot hold the converted codes
    """
    codes = coerce_codes(codes)
    source, target = _as_law(source), _as_law(target)
    if source is target:
        src_bytes = byte_view(codes, name="source")
        dst_bytes = byte_view(out, name="destination", writable=True)
        require_capacity(dst_bytes, src_bytes.size)
        dst_bytes[:src_bytes.size] = src_bytes
        return src_bytes.size
    if source is CompandingLaw.ALAW:
        return alaw_to_ulaw_buffer(codes, out)
    return ulaw_to_alaw_buffer(codes, out)


def transcode(codes: BufferLike, source: CompandingLaw | str, target: CompandingLaw | str) -> np.ndarray:
    """Return ``codes`` converted from law ``source`` to law ``target``.

    Matching laws return an unchanged copy.
    """
    codes = coerce_codes(codes)
    out = np.empty(byte_view(codes, name="source").size, dtype=np.uint8)
    transcode_into(codes, out, source, target)
    return out
