"""µ-law codec object."""

from g711codec.batch import ulaw_encode_buffer, ulaw_decode_buffer
from g711codec.codecs.base import BufferCodec
from g711codec.config.enums import CompandingLaw


class ULawCodec(BufferCodec):
    """Codec for G.711 µ-law (PCMU)."""

    _encode_buffer = ulaw_encode_buffer
    _decode_buffer = ulaw_decode_buffer

    @property
    def law(self) -> CompandingLaw:
        return CompandingLaw.ULAW
