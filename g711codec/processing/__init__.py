"""File processing package for the G.711 codec."""
from g711codec.processing.transcoder import FileTranscoder

__all__ = ["FileTranscoder"]
