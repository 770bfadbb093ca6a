"""Scalar G.711 conversions operating on single samples and codes."""
from g711codec.scalar.alaw import alaw_encode, alaw_decode
from g711codec.scalar.ulaw import ulaw_encode, ulaw_decode
from g711codec.scalar.cross import alaw_to_ulaw, ulaw_to_alaw

__all__ = [
    "alaw_encode",
    "alaw_decode",
    "ulaw_encode",
    "ulaw_decode",
    "alaw_to_ulaw",
    "ulaw_to_alaw",
]
