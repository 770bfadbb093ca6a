"""Integration test configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
import soundfile as sf


def pytest_collection_modifyitems(items):
    """Automatically mark all tests in integration/ with @pytest.mark.integration."""
    for item in items:
        if "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def speech_like_pcm() -> np.ndarray:
    """One second of 8 kHz int16 audio spanning the full amplitude range.

    A sum of tones under a slow envelope, plus the int16 extremes, so
    every companding segment is exercised.
    """
    sample_rate = 8000
    t = np.arange(sample_rate) / sample_rate
    envelope = np.abs(np.sin(2 * np.pi * 2 * t))
    signal = envelope * (0.6 * np.sin(2 * np.pi * 300 * t) + 0.4 * np.sin(2 * np.pi * 1250 * t))
    pcm = np.rint(signal * 32767).astype(np.int16)
    pcm[:4] = [-32768, 32767, 0, -1]
    return pcm


@pytest.fixture
def mono_wav(tmp_path: Path, speech_like_pcm: np.ndarray) -> Path:
    """Write speech_like_pcm to an 8 kHz mono PCM_16 WAV."""
    path = tmp_path / "speech.wav"
    sf.write(str(path), speech_like_pcm, 8000, subtype="PCM_16")
    return path


@pytest.fixture
def stereo_wav(tmp_path: Path, speech_like_pcm: np.ndarray) -> Path:
    """Write a stereo WAV whose right channel is the inverted left channel."""
    path = tmp_path / "stereo.wav"
    frames = np.stack([speech_like_pcm, ~speech_like_pcm], axis=1)
    sf.write(str(path), frames, 8000, subtype="PCM_16")
    return path
