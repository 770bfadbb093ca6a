"""Linear PCM file reading and writing.

WAV files go through soundfile and carry their own rate, channel count
and byte order. Any other file is raw interleaved 16-bit PCM in the
configured byte order. Samples handed to the codec are always 1-D,
machine-native int16.
"""

from collections.abc import Iterator
from pathlib import Path
from types import TracebackType
from typing import BinaryIO, Self

import numpy as np
import soundfile as sf

from g711codec.config.enums import ByteOrder
from g711codec.constants import PCM_SAMPLE_BYTES
from g711codec.exceptions import AudioFileError

WAV_SUFFIXES = frozenset({".wav", ".wave"})


def is_wav(path: Path) -> bool:
    """Return True if ``path`` should be handled as a WAV file."""
    return path.suffix.lower() in WAV_SUFFIXES


def raw_dtype(byteorder: ByteOrder) -> np.dtype:
    """Return the NumPy dtype of a raw 16-bit sample in ``byteorder``."""
    return np.dtype(f"{byteorder.dtype_code}i2")


class PcmReader:
    """Read 16-bit PCM from a WAV or raw file in fixed-size blocks."""

    def __init__(self, path: Path, *, byteorder: ByteOrder = ByteOrder.LITTLE, channels: int = 1) -> None:
        """Initialize the reader.

        Args:
            path: Input file
            byteorder: Byte order of raw files (ignored for WAV)
            channels: Interleaved channels in raw files (WAV files report their own)

        Raises:
            AudioFileError: If the file is missing, unreadable or a raw file
                holds a partial sample
        """
        if not path.is_file():
            raise AudioFileError(f"Audio file does not exist: {path}")
        self.path = path
        self.byteorder = byteorder

        if is_wav(path):
            try:
                info = sf.info(str(path))
            except RuntimeError as e:
                raise AudioFileError(f"Failed to read WAV file {path}: {e}") from e
            self.channels = info.channels
            self.sample_rate: int | None = info.samplerate
            self.frames = info.frames
        else:
            size = path.stat().st_size
            if size % (PCM_SAMPLE_BYTES * channels):
                raise AudioFileError(
                    f"Raw PCM file {path.name} is {size} bytes, not a whole number of "
                    f"{channels}-channel 16-bit frames."
                )
            self.channels = channels
            self.sample_rate = None
            self.frames = size // (PCM_SAMPLE_BYTES * channels)

    def blocks(self, frames: int) -> Iterator[np.ndarray]:
        """Yield interleaved native int16 samples, ``frames`` frames at a time."""
        if is_wav(self.path):
            yield from self._wav_blocks(frames)
        else:
            yield from self._raw_blocks(frames)

    def _wav_blocks(self, frames: int) -> Iterator[np.ndarray]:
        try:
            with sf.SoundFile(str(self.path)) as src:
                while True:
                    data = src.read(frames, dtype="int16", always_2d=True)
                    if len(data) == 0:
                        break
                    yield np.ascontiguousarray(data).reshape(-1)
        except RuntimeError as e:
            raise AudioFileError(f"Failed to read WAV file {self.path}: {e}") from e

    def _raw_blocks(self, frames: int) -> Iterator[np.ndarray]:
        dtype = raw_dtype(self.byteorder)
        block_bytes = frames * self.channels * PCM_SAMPLE_BYTES
        with open(self.path, "rb") as src:
            while chunk := src.read(block_bytes):
                yield np.frombuffer(chunk, dtype=dtype).astype(np.int16)


class PcmWriter:
    """Write 16-bit PCM to a WAV or raw file.

    Used as a context manager; the file is created on entry.
    """

    def __init__(
        self,
        path: Path,
        *,
        sample_rate: int,
        channels: int = 1,
        byteorder: ByteOrder = ByteOrder.LITTLE,
    ) -> None:
        self.path = path
        self.sample_rate = sample_rate
        self.channels = channels
        self.byteorder = byteorder
        self._wav: sf.SoundFile | None = None
        self._raw: BinaryIO | None = None

    def __enter__(self) -> Self:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        try:
            if is_wav(self.path):
                self._wav = sf.SoundFile(
                    str(self.path), "w",
                    samplerate=self.sample_rate,
                    channels=self.channels,
                    subtype="PCM_16",
                )
            else:
                self._raw = open(self.path, "wb")
        except (RuntimeError, OSError) as e:
            raise AudioFileError(f"Failed to create output file {self.path}: {e}") from e
        return self

    def write(self, samples: np.ndarray) -> None:
        """Write interleaved native int16 samples."""
        if samples.size % self.channels:
            raise AudioFileError(
                f"Cannot write {samples.size} samples as whole {self.channels}-channel frames."
            )
        if self._wav is not None:
            self._wav.write(samples.reshape(-1, self.channels))
        elif self._raw is not None:
            self._raw.write(samples.astype(raw_dtype(self.byteorder), copy=False).tobytes())
        else:
            raise AudioFileError(f"Output file {self.path} is not open.")

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._wav is not None:
            self._wav.close()
            self._wav = None
        if self._raw is not None:
            self._raw.close()
            self._raw = None
