"""Unit tests for scalar µ-law encode and decode."""

from __future__ import annotations

import pytest

from g711codec.exceptions import SampleRangeError, CodeRangeError
from g711codec.scalar import ulaw_encode, ulaw_decode


def _step(code: int) -> int:
    """Quantization step of the segment holding ``code``."""
    return 8 << (((code ^ 0xFF) >> 4) & 0x07)


class TestULawKnownVectors:
    """Tests against fixed sample/code pairs."""

    @pytest.mark.parametrize("sample,code", [
        (0, 0xFF),
        (-1, 0x7F),
        (8, 0xFE),
        (-8, 0x7E),
        (100, 0xF2),
        (1000, 0xCE),
        (-1000, 0x4E),
        (4095, 0xAF),
        (32767, 0x80),
        (-32768, 0x00),
    ])
    def test_encode(self, sample: int, code: int) -> None:
        """Test encoding of known samples."""
        assert ulaw_encode(sample) == code

    @pytest.mark.parametrize("code,sample", [
        (0xFF, 0),
        (0x7F, 0),
        (0xFE, 8),
        (0x7E, -8),
        (0xF2, 104),
        (0xCE, 988),
        (0x4E, -988),
        (0xAF, 4092),
        (0x80, 32124),
        (0x00, -32124),
    ])
    def test_decode(self, code: int, sample: int) -> None:
        """Test decoding of known codes."""
        assert ulaw_decode(code) == sample

    def test_zero_is_a_fixed_point(self) -> None:
        """Test that silence survives a round trip exactly."""
        assert ulaw_decode(ulaw_encode(0)) == 0


class TestULawProperties:
    """Exhaustive property tests over the whole sample domain."""

    def test_sign_symmetry_under_ones_complement(self) -> None:
        """Test that ~s encodes to the sign-flipped code of s."""
        for s in range(0, 32768):
            assert ulaw_encode(~s) == ulaw_encode(s) ^ 0x80
            assert ulaw_decode(ulaw_encode(~s)) == -ulaw_decode(ulaw_encode(s))

    def test_quantization_error_within_step(self) -> None:
        """Test reconstruction error is bounded by the segment step, clipped or not."""
        for s in range(-32768, 32768):
            code = ulaw_encode(s)
            error = abs(ulaw_decode(code) - s)
            assert error <= _step(code), s
            if -32000 <= s <= 32000:
                assert error <= _step(code) // 2, s

    def test_idempotent_after_compression(self) -> None:
        """Test that a decoded value re-encodes to the same value."""
        for s in range(-32768, 32768):
            once = ulaw_decode(ulaw_encode(s))
            assert ulaw_decode(ulaw_encode(once)) == once

    def test_every_code_decodes_to_int16(self) -> None:
        """Test all codes decode in range; only the two zeros coincide."""
        values = [ulaw_decode(code) for code in range(256)]
        assert min(values) == -32124
        assert max(values) == 32124
        assert len(set(values)) == 255

    def test_encode_is_monotonic(self) -> None:
        """Test that larger samples never decode smaller."""
        decoded = [ulaw_decode(ulaw_encode(s)) for s in range(-32768, 32768)]
        assert all(a <= b for a, b in zip(decoded, decoded[1:]))


class TestULawDomain:
    """Tests for input domain handling."""

    def test_encode_rejects_out_of_range(self) -> None:
        """Test that samples outside int16 raise SampleRangeError."""
        with pytest.raises(SampleRangeError) as exc_info:
            ulaw_encode(32768)
        assert exc_info.value.sample == 32768

    def test_decode_rejects_out_of_range(self) -> None:
        """Test that codes outside uint8 raise CodeRangeError."""
        with pytest.raises(CodeRangeError, match="unsigned 8-bit"):
            ulaw_decode(0x100)

    def test_clipping_at_top_of_range(self) -> None:
        """Test that every sample above the clip point shares the top code."""
        assert {ulaw_encode(s) for s in range(32380, 32768)} == {0x80}
