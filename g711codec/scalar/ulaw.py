"""µ-law companding for 16-bit linear PCM."""

from typing import SupportsIndex

from g711codec.constants import (
    SIGN_BIT,
    ULAW_INVERT_MASK,
    ULAW_BIAS,
    ULAW_CLIP,
    ULAW_DROP_BITS,
    ULAW_INTERVAL_MASK,
    ULAW_SEGMENT_MASK,
    SEGMENT_STEPS,
)
from g711codec.scalar.domain import check_sample, check_code


def ulaw_encode(sample: SupportsIndex) -> int:
    """Encode a single 16-bit linear PCM sample as a µ-law code.

    Args:
        sample: Signed 16-bit PCM value

    Returns:
        int: The transmitted µ-law code (0-255), all bits inverted

    Raises:
        SampleRangeError: If ``sample`` is outside [-32768, 32767]
    """
    p = check_sample(sample)
    if p < 0:
        # Ones complement, as for A-law
        p = ~p
        sign = SIGN_BIT
    else:
        sign = 0x00

    p = min(p + ULAW_BIAS, ULAW_CLIP) >> ULAW_DROP_BITS

    segment = 0x00
    for threshold, shift, increment in SEGMENT_STEPS:
        if p >= threshold:
            p >>= shift
            segment += increment

    # p is now 0x10 | interval
    return (sign | segment | (p & ULAW_INTERVAL_MASK)) ^ ULAW_INVERT_MASK


def ulaw_decode(code: SupportsIndex) -> int:
    """Decode a single µ-law code into a linear PCM value.

    Args:
        code: Transmitted µ-law code (0-255)

    Returns:
        int: Linear PCM value within [-32124, 32124]

    Raises:
        CodeRangeError: If ``code`` is outside [0, 255]
    """
    ulaw = check_code(code) ^ ULAW_INVERT_MASK

    # Implied MSB (0x80) plus a half step (0x04) centres the value in its interval
    linear = ((ulaw & ULAW_INTERVAL_MASK) << ULAW_DROP_BITS) | ULAW_BIAS
    linear <<= (ulaw >> 4) & ULAW_SEGMENT_MASK
    linear -= ULAW_BIAS

    return -linear if ulaw & SIGN_BIT else linear
