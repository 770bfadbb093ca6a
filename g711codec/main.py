"""Entry point for the g711 command-line interface.

Exposes a Typer-powered CLI that encodes, decodes and converts raw G.711
code files using the batch codec.
"""

from g711codec.cli.app import app


if __name__ == "__main__":
    app()
