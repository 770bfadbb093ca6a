"""CLI application definition for the G.711 codec."""

import typer

from g711codec.cli.commands import main, encode, decode, convert, init_config

app = typer.Typer(
    add_completion=False,
    help="ITU-T G.711 A-law / µ-law codec.",
    no_args_is_help=True,
)

app.callback()(main)

# Register commands
app.command(name="encode", help="Encode 16-bit PCM into G.711 codes")(encode)
app.command(name="decode", help="Decode G.711 codes into 16-bit PCM")(decode)
app.command(name="convert", help="Convert codes between A-law and µ-law")(convert)
app.command(name="init-config", help="Generate an example configuration file")(init_config)
