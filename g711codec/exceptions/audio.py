"""Audio file exceptions for the G.711 codec."""

from g711codec.exceptions.base import G711Error


class AudioFileError(G711Error):
    """Raised when audio file operations fail during transcoding.

    This exception is raised for issues such as:
    - Missing or unreadable input files
    - Raw PCM files with an odd byte count
    - WAV files that cannot be opened or written by soundfile
    """
