"""Command-line interface for jrelaunch."""

from jrelaunch.cli.app import entrypoint, main

__all__ = ["entrypoint", "main"]
