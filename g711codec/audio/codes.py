"""Raw G.711 code file reading."""

from collections.abc import Iterator
from pathlib import Path

import numpy as np

from g711codec.exceptions import AudioFileError


def code_file_length(path: Path) -> int:
    """Return the number of codes in ``path``.

    Raises:
        AudioFileError: If the file does not exist
    """
    if not path.is_file():
        raise AudioFileError(f"Code file does not exist: {path}")
    return path.stat().st_size


def iter_code_blocks(path: Path, block_size: int) -> Iterator[np.ndarray]:
    """Yield the codes of ``path`` as uint8 arrays of at most ``block_size``."""
    with open(path, "rb") as src:
        while chunk := src.read(block_size):
            yield np.frombuffer(chunk, dtype=np.uint8)
