"""Output handler protocols for the G.711 codec."""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputHandler(Protocol):
    """Where the transcoder and CLI send user-facing messages.

    Library code never prints directly; it reports through a handler so
    callers can swap the console for a logger or a mock.
    """

    def print(self, message: str, **kwargs) -> None:
        ...

    def info(self, message: str) -> None:
        ...

    def warning(self, message: str) -> None:
        """Report a recoverable oddity, such as an unexpected sample rate."""
        ...

    def error(self, message: str) -> None:
        """Report a failure that ends the current command."""
        ...

    def summary(self, action: str, count: int, unit: str, destination: Path) -> None:
        """Report a finished transcode, e.g. ``Encoded 8000 samples to out.al``."""
        ...
