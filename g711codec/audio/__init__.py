"""Audio file I/O package for the G.711 codec."""
from g711codec.audio.pcm import PcmReader, PcmWriter, is_wav
from g711codec.audio.codes import iter_code_blocks, code_file_length

__all__ = ["PcmReader", "PcmWriter", "is_wav", "iter_code_blocks", "code_file_length"]
