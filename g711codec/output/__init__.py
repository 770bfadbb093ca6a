"""Output handling package for the G.711 codec."""
from g711codec.output.protocols import OutputHandler
from g711codec.output.console import ConsoleOutputHandler

__all__ = ["OutputHandler", "ConsoleOutputHandler"]
