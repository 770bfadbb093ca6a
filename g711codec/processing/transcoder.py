"""File transcoding for the G.711 codec.

Input is converted one chunk at a time. Every chunk is independent of the
others, so the output is identical to converting the whole file at once.
Output goes to a temporary file that is moved into place only after the
last chunk is written.
"""

import logging
import math
import tempfile
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path

import numpy as np
from tqdm import tqdm

from g711codec.audio.codes import iter_code_blocks, code_file_length
from g711codec.audio.pcm import PcmReader, PcmWriter
from g711codec.codecs import get_codec, transcode_into
from g711codec.config.enums import CompandingLaw
from g711codec.config.models import TranscodeOptions
from g711codec.exceptions import AudioFileError
from g711codec.output import OutputHandler, ConsoleOutputHandler

logger = logging.getLogger(__name__)


class FileTranscoder:
    """Encode, decode and convert G.711 files.

    Code files are raw bytes, one code per sample. PCM files are WAV or
    raw 16-bit as described by the options.
    """

    def __init__(
        self,
        options: TranscodeOptions,
        output_handler: OutputHandler | None = None,
        *,
        show_progress: bool = True,
    ) -> None:
        """Initialize the transcoder.

        Args:
            options: Validated transcoding options
            output_handler: Handler for user-facing messages (console if None)
            show_progress: Whether to display tqdm progress bars
        """
        self.options = options
        self.output_handler = output_handler or ConsoleOutputHandler()
        self.show_progress = show_progress

    def encode_file(self, input_path: Path, output_path: Path) -> int:
        """Encode a PCM file into a file of codes.

        Returns:
            int: Number of codes written
        """
        codec = get_codec(self.options.law)
        reader = PcmReader(input_path, byteorder=self.options.byteorder, channels=self.options.channels)
        if reader.sample_rate is not None and reader.sample_rate != self.options.sample_rate:
            self.output_handler.warning(
                f"{input_path.name} is sampled at {reader.sample_rate} Hz; "
                f"G.711 streams are normally {self.options.sample_rate} Hz. Encoding without resampling."
            )

        chunks = self._progress(
            reader.blocks(self.options.chunk_size),
            total=math.ceil(reader.frames / self.options.chunk_size),
            desc=f"Encoding {self.options.law.value}",
        )
        written = 0
        with self._staged_output(output_path) as staged, open(staged, "wb") as dest:
            for samples in chunks:
                codes = np.empty(samples.size, dtype=np.uint8)
                written += codec.encode_into(samples, codes)
                dest.write(codes.tobytes())

        logger.debug(f"Encoded {written} samples from {input_path} to {output_path}")
        self.output_handler.summary("Encoded", written, "samples", output_path)
        return written

    def decode_file(self, input_path: Path, output_path: Path) -> int:
        """Decode a file of codes into a PCM file.

        Returns:
            int: Number of samples written
        """
        codec = get_codec(self.options.law)
        total_codes = code_file_length(input_path)
        if total_codes % self.options.channels:
            raise AudioFileError(
                f"{input_path.name} holds {total_codes} codes, not a whole number of "
                f"{self.options.channels}-channel frames."
            )

        block_size = self.options.chunk_size * self.options.channels
        chunks = self._progress(
            iter_code_blocks(input_path, block_size),
            total=math.ceil(total_codes / block_size),
            desc=f"Decoding {self.options.law.value}",
        )
        written = 0
        with self._staged_output(output_path) as staged, PcmWriter(
            staged,
            sample_rate=self.options.sample_rate,
            channels=self.options.channels,
            byteorder=self.options.byteorder,
        ) as dest:
            for codes in chunks:
                samples = np.empty(codes.size, dtype=np.int16)
                written += codec.decode_into(codes, samples) // samples.itemsize
                dest.write(samples)

        logger.debug(f"Decoded {written} samples from {input_path} to {output_path}")
        self.output_handler.summary("Decoded", written, "samples", output_path)
        return written

    def convert_file(
        self,
        input_path: Path,
        output_path: Path,
        source: CompandingLaw,
        target: CompandingLaw,
    ) -> int:
        """Convert a file of codes from one law to the other.

        Returns:
            int: Number of codes written
        """
        total_codes = code_file_length(input_path)
        if source is target:
            self.output_handler.warning(f"Source and target are both {source.value}; copying codes unchanged.")

        block_size = self.options.chunk_size
        chunks = self._progress(
            iter_code_blocks(input_path, block_size),
            total=math.ceil(total_codes / block_size),
            desc=f"Converting {source.value} to {target.value}",
        )
        written = 0
        with self._staged_output(output_path) as staged, open(staged, "wb") as dest:
            for codes in chunks:
                converted = np.empty(codes.size, dtype=np.uint8)
                written += transcode_into(codes, converted, source, target)
                dest.write(converted.tobytes())

        logger.debug(f"Converted {written} codes from {input_path} to {output_path}")
        self.output_handler.summary("Converted", written, "codes", output_path)
        return written

    def _progress(self, chunks: Iterable[np.ndarray], *, total: int, desc: str) -> Iterator[np.ndarray]:
        return iter(tqdm(chunks, total=total, desc=desc, unit="chunk", disable=not self.show_progress))

    @staticmethod
    @contextmanager
    def _staged_output(path: Path) -> Iterator[Path]:
        """Yield a temporary sibling of ``path`` that replaces it on success.

        The temporary file keeps the suffix of ``path`` so WAV output is
        still detected. On error it is removed and ``path`` is left as it was.
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                dir=path.parent,
                prefix=f".{path.stem}.",
                suffix=path.suffix,
                delete=False,
            ) as temp_file:
                staged = Path(temp_file.name)
        except OSError as e:
            raise AudioFileError(f"Failed to create output file {path}: {e}") from e

        try:
            yield staged
            staged.replace(path)
        except BaseException:
            staged.unlink(missing_ok=True)
            raise
