"""Configuration file generator for the G.711 codec."""

from pathlib import Path

import yaml

from g711codec.config.models import TranscodeOptions
from g711codec.config.protocols import CURRENT_SCHEMA_VERSION


# Template header with documentation
CONFIG_HEADER = """\
# G.711 Codec Configuration File
# ==============================
#
#   law:         Companding law for encode/decode - alaw (default) or ulaw
#   byteorder:   Byte order of raw PCM files - little (default), big or native
#   sample_rate: Sample rate written to decoded WAV files (default 8000)
#   channels:    Interleaved channels in code and raw PCM files (default 1)
#   chunk_size:  Frames converted per batch call (default 4096)
#
# WAV files always carry their own byte order, rate and channel count;
# the values above apply to raw files. Command-line options override
# anything set here.

"""


class ConfigGenerator:
    """Generate example YAML configuration files."""

    def __init__(self, options: TranscodeOptions | None = None) -> None:
        self.options = options or TranscodeOptions()

    def generate(self, output_path: Path, *, include_header: bool = True) -> None:
        """Generate a YAML configuration file.

        Args:
            output_path: Path where the config file will be written
            include_header: Whether to include documentation header

        Raises:
            OSError: If the file cannot be written
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        config = {
            'schema_version': CURRENT_SCHEMA_VERSION,
            **self.options.model_dump(mode="json"),
        }

        yaml_content = yaml.safe_dump(
            config,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=2,
        )

        with open(output_path, 'w', encoding='utf-8') as f:
            if include_header:
                f.write(CONFIG_HEADER)
            f.write(yaml_content)
