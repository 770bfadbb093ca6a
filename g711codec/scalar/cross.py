"""Direct conversion between A-law and µ-law codes.

Both mappings are derived by composing one law's decoder with the other's
encoder over all 256 codes. The tables are built once at import time, so a
conversion is a single lookup and never materializes a linear value.
"""

from typing import SupportsIndex

from g711codec.constants import CODE_COUNT
from g711codec.scalar.alaw import alaw_encode, alaw_decode
from g711codec.scalar.ulaw import ulaw_encode, ulaw_decode
from g711codec.scalar.domain import check_code

ALAW_TO_ULAW: tuple[int, ...] = tuple(ulaw_encode(alaw_decode(code)) for code in range(CODE_COUNT))
ULAW_TO_ALAW: tuple[int, ...] = tuple(alaw_encode(ulaw_decode(code)) for code in range(CODE_COUNT))


def alaw_to_ulaw(code: SupportsIndex) -> int:
    """Convert an A-law code to the µ-law code for the same decoded value."""
    return ALAW_TO_ULAW[check_code(code)]


def ulaw_to_alaw(code: SupportsIndex) -> int:
    """Convert a µ-law code to the A-law code for the same decoded value."""
    return ULAW_TO_ALAW[check_code(code)]
