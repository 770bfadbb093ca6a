"""Unit test shared fixtures.

Fixtures here are available to all unit tests but not integration tests.
Focus on lightweight data and fast execution.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest


# =============================================================================
# Automatic Markers
# =============================================================================

def pytest_collection_modifyitems(items):
    """Automatically mark all tests in unit/ directory with @pytest.mark.unit."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Sample Data Factories
# =============================================================================

@pytest.fixture
def sine_factory():
    """Factory fixture for int16 sine waves.

    Returns:
        Callable that creates a 1-D int16 sine wave.

    Example:
        >>> pcm = sine_factory(frames=160, amplitude=12000)
        >>> assert pcm.dtype == np.int16
    """
    def _create(
        frames: int = 800,
        frequency: float = 440.0,
        amplitude: float = 16000.0,
        sample_rate: int = 8000,
    ) -> np.ndarray:
        t = np.arange(frames) / sample_rate
        return np.rint(amplitude * np.sin(2 * np.pi * frequency * t)).astype(np.int16)

    return _create


@pytest.fixture
def write_raw_file(tmp_path: Path):
    """Factory fixture writing raw bytes to a file under tmp_path."""
    def _create(filename: str, data: bytes) -> Path:
        file_path = tmp_path / filename
        file_path.write_bytes(data)
        return file_path

    return _create
