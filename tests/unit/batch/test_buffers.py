"""Unit tests for batch buffer helpers."""

from __future__ import annotations

import numpy as np
import pytest

from g711codec.batch.buffers import (
    byte_view,
    resolve_size,
    require_capacity,
    coerce_samples,
    coerce_codes,
)
from g711codec.exceptions import (
    BufferLayoutError,
    BufferSizeError,
    SampleRangeError,
    CodeRangeError,
)


class TestByteView:
    """Tests for byte_view."""

    def test_shares_memory_with_array(self) -> None:
        """Test the view aliases the array rather than copying it."""
        pcm = np.zeros(3, dtype=np.int16)
        view = byte_view(pcm, name="source", writable=True)
        assert view.dtype == np.uint8
        assert view.size == 6
        view[:] = 0xFF
        np.testing.assert_array_equal(pcm, [-1, -1, -1])

    def test_flattens_multidimensional_arrays(self) -> None:
        """Test 2-D frames are viewed in C order."""
        frames = np.arange(6, dtype=np.int16).reshape(3, 2)
        assert byte_view(frames, name="source").size == 12

    def test_bytes_are_read_only(self) -> None:
        """Test bytes objects produce read-only views."""
        assert not byte_view(b"ab", name="source").flags.writeable
        with pytest.raises(BufferLayoutError):
            byte_view(b"ab", name="destination", writable=True)

    def test_bytearray_is_writable(self) -> None:
        """Test bytearray objects produce writable views."""
        assert byte_view(bytearray(2), name="destination", writable=True).flags.writeable


class TestSizeChecks:
    """Tests for resolve_size and require_capacity."""

    def test_default_size_is_whole_buffer(self) -> None:
        """Test None resolves to the buffer length."""
        assert resolve_size(np.zeros(5, dtype=np.uint8), None, name="source") == 5

    def test_explicit_size(self) -> None:
        """Test an explicit size within the buffer is returned."""
        assert resolve_size(np.zeros(5, dtype=np.uint8), np.int64(3), name="source") == 3

    def test_capacity_shortfall(self) -> None:
        """Test require_capacity reports required and available sizes."""
        with pytest.raises(BufferSizeError) as exc_info:
            require_capacity(np.zeros(2, dtype=np.uint8), 3)
        assert (exc_info.value.required, exc_info.value.available) == (3, 2)


class TestCoercion:
    """Tests for coerce_samples and coerce_codes."""

    def test_int16_passthrough(self) -> None:
        """Test int16 arrays are returned unchanged."""
        pcm = np.zeros(2, dtype=np.int16)
        assert coerce_samples(pcm) is pcm

    def test_raw_buffers_passthrough(self) -> None:
        """Test raw buffers are not reinterpreted."""
        data = b"\x00\x01"
        assert coerce_samples(data) is data
        assert coerce_codes(data) is data

    def test_wider_integers_narrowed(self) -> None:
        """Test in-range int32 samples convert to int16."""
        result = coerce_samples(np.array([-32768, 0, 32767], dtype=np.int32))
        assert result.dtype == np.int16
        np.testing.assert_array_equal(result, [-32768, 0, 32767])

    def test_out_of_range_samples(self) -> None:
        """Test out-of-range samples are rejected, not wrapped."""
        with pytest.raises(SampleRangeError):
            coerce_samples(np.array([0, 40000], dtype=np.int32))
        with pytest.raises(SampleRangeError):
            coerce_samples(np.array([-40000], dtype=np.int64))

    def test_float_samples_rejected(self) -> None:
        """Test floating-point sample arrays are rejected."""
        with pytest.raises(BufferLayoutError, match="must be integers"):
            coerce_samples(np.array([0.5], dtype=np.float32))

    def test_out_of_range_codes(self) -> None:
        """Test codes outside uint8 are rejected."""
        with pytest.raises(CodeRangeError):
            coerce_codes(np.array([256], dtype=np.int16))
        with pytest.raises(CodeRangeError):
            coerce_codes(np.array([-1], dtype=np.int16))

    def test_wider_codes_narrowed(self) -> None:
        """Test in-range code arrays convert to uint8."""
        result = coerce_codes(np.array([0, 255], dtype=np.int64))
        assert result.dtype == np.uint8

    def test_strided_int16_made_contiguous(self) -> None:
        """Test strided int16 samples are copied into a contiguous array."""
        result = coerce_samples(np.arange(8, dtype=np.int16)[::2])
        assert result.flags.c_contiguous
        np.testing.assert_array_equal(result, [0, 2, 4, 6])

    def test_strided_uint8_made_contiguous(self) -> None:
        """Test strided uint8 codes are copied into a contiguous array."""
        result = coerce_codes(np.arange(6, dtype=np.uint8)[1::2])
        assert result.flags.c_contiguous
        np.testing.assert_array_equal(result, [1, 3, 5])

    def test_byteswapped_samples_converted(self) -> None:
        """Test non-native int16 arrays are converted to native order."""
        result = coerce_samples(np.array([1, -2], dtype=">i2"))
        assert result.dtype == np.int16
        assert result.dtype.isnative
        np.testing.assert_array_equal(result, [1, -2])
