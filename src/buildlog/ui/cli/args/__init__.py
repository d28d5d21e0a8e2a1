"""Command line argument handling package."""

from buildlog.ui.cli.args.parser import ArgumentParser
from buildlog.ui.cli.args.options import LogArgs

__all__ = ["ArgumentParser", "LogArgs"]
