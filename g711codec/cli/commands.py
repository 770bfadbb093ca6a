"""CLI command implementations for the G.711 codec."""

import logging
from pathlib import Path

import typer
from rich.console import Console

from g711codec.cli.utils import _load_options, _ensure_distinct
from g711codec.config import CompandingLaw, ByteOrder, ConfigGenerator, ConfigResolver, TranscodeOptions
from g711codec.constants import VERSION
from g711codec.exceptions import G711Error
from g711codec.output import ConsoleOutputHandler
from g711codec.processing import FileTranscoder

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Default to WARNING level
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

# Paths in messages are never wrapped
console = Console(soft_wrap=True)
output_handler = ConsoleOutputHandler(console)


def version_callback(value: bool) -> None:
    """Handle version flag callback for Typer CLI.

    Args:
        value: Whether the version flag was provided
    """
    if value:
        typer.echo(f"g711codec v{VERSION}")
        raise typer.Exit()


def main(
        version: bool = typer.Option(
            None, "--version", "-v",
            callback=version_callback,
            is_eager=True,
            is_flag=True,
            help="Show version and exit."
        ),
        verbose: bool = typer.Option(
            False, "--verbose",
            help="Enable verbose debug output"
        ),
) -> None:
    """G.711 A-law / µ-law codec."""

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")
    else:
        logging.getLogger().setLevel(logging.WARNING)


def _fail(message: object) -> typer.Exit:
    output_handler.error(str(message))
    return typer.Exit(code=1)


def _transcoder(options: TranscodeOptions) -> FileTranscoder:
    return FileTranscoder(options, output_handler)


def encode(
        input_path: Path = typer.Argument(
            ..., exists=True, file_okay=True, dir_okay=False, readable=True, resolve_path=True,
            help="16-bit PCM input (.wav, or raw samples)"
        ),
        output_path: Path = typer.Argument(..., dir_okay=False, resolve_path=True, help="Raw code file to write"),
        law: CompandingLaw | None = typer.Option(None, "--law", "-l", help="Companding law"),
        byteorder: ByteOrder | None = typer.Option(None, "--byteorder", help="Byte order of raw PCM input"),
        channels: int | None = typer.Option(None, "--channels", min=1, help="Channels in raw PCM input"),
        chunk_size: int | None = typer.Option(None, "--chunk-size", min=1, help="Frames per batch call"),
        config: Path | None = typer.Option(None, "--config", "-c", dir_okay=False, help="Configuration file"),
) -> None:
    """Encode 16-bit linear PCM into A-law or µ-law codes."""
    try:
        _ensure_distinct(input_path, output_path)
        options = _load_options(config, law=law, byteorder=byteorder, channels=channels, chunk_size=chunk_size)
        _transcoder(options).encode_file(input_path, output_path)
    except (G711Error, FileNotFoundError, ValueError) as e:
        raise _fail(e)


def decode(
        input_path: Path = typer.Argument(
            ..., exists=True, file_okay=True, dir_okay=False, readable=True, resolve_path=True,
            help="Raw code file"
        ),
        output_path: Path = typer.Argument(
            ..., dir_okay=False, resolve_path=True,
            help="16-bit PCM output (.wav, or raw samples)"
        ),
        law: CompandingLaw | None = typer.Option(None, "--law", "-l", help="Companding law"),
        byteorder: ByteOrder | None = typer.Option(None, "--byteorder", help="Byte order of raw PCM output"),
        sample_rate: int | None = typer.Option(None, "--sample-rate", min=1, help="Sample rate of WAV output"),
        channels: int | None = typer.Option(None, "--channels", min=1, help="Interleaved channels in the code file"),
        chunk_size: int | None = typer.Option(None, "--chunk-size", min=1, help="Frames per batch call"),
        config: Path | None = typer.Option(None, "--config", "-c", dir_okay=False, help="Configuration file"),
) -> None:
    """Decode A-law or µ-law codes into 16-bit linear PCM."""
    try:
        _ensure_distinct(input_path, output_path)
        options = _load_options(
            config,
            law=law,
            byteorder=byteorder,
            sample_rate=sample_rate,
            channels=channels,
            chunk_size=chunk_size,
        )
        _transcoder(options).decode_file(input_path, output_path)
    except (G711Error, FileNotFoundError, ValueError) as e:
        raise _fail(e)


def convert(
        input_path: Path = typer.Argument(
            ..., exists=True, file_okay=True, dir_okay=False, readable=True, resolve_path=True,
            help="Raw code file"
        ),
        output_path: Path = typer.Argument(..., dir_okay=False, resolve_path=True, help="Raw code file to write"),
        source: CompandingLaw = typer.Option(..., "--from", help="Law of the input codes"),
        target: CompandingLaw = typer.Option(..., "--to", help="Law of the output codes"),
        chunk_size: int | None = typer.Option(None, "--chunk-size", min=1, help="Codes per batch call"),
        config: Path | None = typer.Option(None, "--config", "-c", dir_okay=False, help="Configuration file"),
) -> None:
    """Convert codes directly between A-law and µ-law."""
    try:
        _ensure_distinct(input_path, output_path)
        options = _load_options(config, chunk_size=chunk_size)
        _transcoder(options).convert_file(input_path, output_path, source, target)
    except (G711Error, FileNotFoundError, ValueError) as e:
        raise _fail(e)


def init_config(
        output: Path | None = typer.Argument(None, dir_okay=False, help="Where to write the file (default ./g711.yaml)"),
        force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write an example configuration file."""
    path = output or ConfigResolver().default_path()
    if path.exists() and not force:
        raise _fail(f"{path} already exists; use --force to overwrite it.")

    try:
        ConfigGenerator().generate(path)
    except OSError as e:
        raise _fail(e)
    output_handler.info(f"Wrote example configuration to {path}")
