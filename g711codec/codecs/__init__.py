"""Codec objects wrapping the batch G.711 operations."""
from g711codec.codecs.protocols import Codec
from g711codec.codecs.alaw import ALawCodec
from g711codec.codecs.ulaw import ULawCodec
from g711codec.codecs.factory import get_codec, transcode, transcode_into

__all__ = ["Codec", "ALawCodec", "ULawCodec", "get_codec", "transcode", "transcode_into"]
