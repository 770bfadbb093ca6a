"""A-law companding for 16-bit linear PCM.

A-law codes carry a sign bit (set for non-negative samples), a 3-bit
segment and a 4-bit interval. Every other bit of the code is inverted for
transmission, including the bits forced by the sign.
"""

from typing import SupportsIndex

from g711codec.constants import (
    SIGN_BIT,
    ALAW_INVERT_MASK,
    ALAW_MAGNITUDE_MASK,
    ALAW_MANTISSA_MASK,
    ALAW_SEGMENT_THRESHOLD,
    ALAW_SEGMENT_MSB,
    ALAW_HALF_STEP,
    ALAW_DROP_BITS,
    SEGMENT_STEPS,
)
from g711codec.scalar.domain import check_sample, check_code


def alaw_encode(sample: SupportsIndex) -> int:
    """Encode a single 16-bit linear PCM sample as an A-law code.

    Negative samples are folded with ones complement (``~sample``) instead
    of negation. This keeps the quantizer symmetric and equally spaced
    around the zero crossing, as G.711 requires.

    Args:
        sample: Signed 16-bit PCM value

    Returns:
        int: The transmitted A-law code (0-255)

    Raises:
        SampleRangeError: If ``sample`` is outside [-32768, 32767]
    """
    p = check_sample(sample)
    if p < 0:
        p = ~p
        a = 0x00
    else:
        a = SIGN_BIT

    p >>= ALAW_DROP_BITS
    if p >= ALAW_SEGMENT_THRESHOLD:
        for threshold, shift, increment in SEGMENT_STEPS:
            if p >= threshold:
                p >>= shift
                a += increment

    # The leading one left in p carries into the segment field
    a += p
    return a ^ ALAW_INVERT_MASK


def alaw_decode(code: SupportsIndex) -> int:
    """Decode a single A-law code into a linear PCM value.

    The value is reconstructed at the middle of its quantization interval,
    so code ``0xD5`` (the code for silence) decodes to +8, not 0.

    Args:
        code: Transmitted A-law code (0-255)

    Returns:
        int: Linear PCM value within [-32256, 32256]

    Raises:
        CodeRangeError: If ``code`` is outside [0, 255]
    """
    alaw = check_code(code) ^ ALAW_INVERT_MASK
    sign = alaw & SIGN_BIT
    linear = ((alaw & ALAW_MANTISSA_MASK) << ALAW_DROP_BITS) + ALAW_HALF_STEP

    alaw &= ALAW_MAGNITUDE_MASK
    if alaw >= ALAW_SEGMENT_THRESHOLD:
        linear |= ALAW_SEGMENT_MSB
        linear <<= (alaw >> 4) - 1

    return linear if sign else -linear
