"""Console-based output handler for the G.711 codec."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape


class ConsoleOutputHandler:
    """Write transcoding messages to a rich Console.

    Message text is escaped before styling, so codec errors such as
    ``outside the unsigned 8-bit range [0, 255]`` print literally.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(soft_wrap=True)

    def print(self, message: str, **kwargs) -> None:
        self.console.print(message, **kwargs)

    def info(self, message: str) -> None:
        self.print(escape(message))

    def warning(self, message: str) -> None:
        self.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        self.print(f"[red]Error:[/red] {escape(message)}")

    def summary(self, action: str, count: int, unit: str, destination: Path) -> None:
        noun = unit if count != 1 else unit.rstrip("s")
        self.print(f"[green]{action}[/green] {count} {noun} to {escape(str(destination))}")
