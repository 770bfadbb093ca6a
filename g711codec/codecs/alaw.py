"""A-law codec object."""

from g711codec.batch import alaw_encode_buffer, alaw_decode_buffer
from g711codec.codecs.base import BufferCodec
from g711codec.config.enums import CompandingLaw


class ALawCodec(BufferCodec):
    """Codec for G.711 A-law (PCMA)."""

    _encode_buffer = alaw_encode_buffer
    _decode_buffer = alaw_decode_buffer

    @property
    def law(self) -> CompandingLaw:
        return CompandingLaw.ALAW
