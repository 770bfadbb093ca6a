"""NumPy lookup tables derived from the scalar codecs.

Encode tables have 65536 entries indexed by the sample's bit pattern read
as ``uint16``; decode and cross-conversion tables have 256 entries indexed
by code. Every table is generated from the scalar functions, so batch
output matches scalar output by construction. Tables are built on first
use and frozen read-only.
"""

import logging
from collections.abc import Callable, Iterable
from functools import cache

import numpy as np

from g711codec.constants import PCM_COUNT, PCM_MAX
from g711codec.scalar import alaw_encode, alaw_decode, ulaw_encode, ulaw_decode
from g711codec.scalar.cross import ALAW_TO_ULAW, ULAW_TO_ALAW

logger = logging.getLogger(__name__)


def _freeze(values: Iterable[int], dtype: type[np.generic]) -> np.ndarray:
    table = np.fromiter(values, dtype=dtype)
    table.flags.writeable = False
    return table


def _encode_table(encode: Callable[[int], int]) -> np.ndarray:
    # Index i is the two's-complement bit pattern of the sample
    table = _freeze(
        (encode(i if i <= PCM_MAX else i - PCM_COUNT) for i in range(PCM_COUNT)),
        np.uint8,
    )
    logger.debug(f"Built {encode.__name__} table ({table.size} entries)")
    return table


@cache
def alaw_encode_table() -> np.ndarray:
    return _encode_table(alaw_encode)


@cache
def ulaw_encode_table() -> np.ndarray:
    return _encode_table(ulaw_encode)


@cache
def alaw_decode_table() -> np.ndarray:
    return _freeze(map(alaw_decode, range(256)), np.int16)


@cache
def ulaw_decode_table() -> np.ndarray:
    return _freeze(map(ulaw_decode, range(256)), np.int16)


@cache
def alaw_to_ulaw_table() -> np.ndarray:
    return _freeze(ALAW_TO_ULAW, np.uint8)


@cache
def ulaw_to_alaw_table() -> np.ndarray:
    return _freeze(ULAW_TO_ALAW, np.uint8)
