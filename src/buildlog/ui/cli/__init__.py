"""Command line interface package."""

from buildlog.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
