"""Command-line interface for the G.711 codec."""
