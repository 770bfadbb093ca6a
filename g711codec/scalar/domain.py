"""Input domain checks shared by the scalar codecs."""

import operator
from typing import SupportsIndex

from g711codec.constants import PCM_MIN, PCM_MAX, CODE_MIN, CODE_MAX
from g711codec.exceptions import SampleRangeError, CodeRangeError


def check_sample(sample: SupportsIndex) -> int:
    """Return ``sample`` as a plain int, rejecting values outside int16."""
    value = operator.index(sample)
    if not PCM_MIN <= value <= PCM_MAX:
        raise SampleRangeError(value)
    return value


def check_code(code: SupportsIndex) -> int:
    """Return ``code`` as a plain int, rejecting values outside uint8."""
    value = operator.index(code)
    if not CODE_MIN <= value <= CODE_MAX:
        raise CodeRangeError(value)
    return value
