"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any, final

from rich.markup import escape

from buildlog.config.config import Config
from buildlog.features.transform.options import CLEAN_ACTION, EDIT_ACTION
from buildlog.platform.logging import logger, setup_logger
from buildlog.ui.cli.args.options import LogArgs

ACTION_ALIASES: dict[str, str] = {
    "edit": EDIT_ACTION,
    "clean": CLEAN_ACTION,
    "delete": CLEAN_ACTION,
}


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="buildlog",
            description="buildlog - Report the files flowing through a build step.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "paths",
            nargs="+",
            type=str,
            help="Files or directories to stream through the logger",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "--pattern",
            type=str,
            default="*",
            help="Glob used when walking directories (default: all files)",
            metavar="GLOB",
        )
        _ = parser.add_argument(
            "--action",
            type=str,
            default="",
            help="Action label for every file; 'edit', 'clean' and 'delete' map to glyphs",
            metavar="ACTION",
        )
        _ = parser.add_argument(
            "--prefix",
            type=str,
            help="Left-hand decoration for each report line (shown literally)",
        )
        _ = parser.add_argument(
            "--suffix",
            type=str,
            help="Right-hand decoration for each report line (shown literally)",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show cwd, base, path and stat details for every file",
        )
        _ = parser.add_argument(
            "--full",
            action="store_true",
            help="Show the cwd/base/path block instead of the relative path",
        )
        _ = parser.add_argument(
            "--count-only",
            action="store_true",
            help="Only report the number of files",
        )
        _ = parser.add_argument(
            "--no-loader",
            action="store_true",
            help="Disable the progress spinner",
        )
        _ = parser.add_argument(
            "--no-contents",
            action="store_true",
            help="Do not read file contents (sizes are reported as zero)",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            help="Path to a TOML configuration file",
            metavar="CONFIG",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> LogArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            LogArgs: Processed command line arguments.

        Raises:
            SystemExit: If an input path does not exist.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load(Path(parsed_args.config) if parsed_args.config else None)
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        paths = [Path(raw) for raw in parsed_args.paths]
        for path in paths:
            if not path.exists():
                logger.error("Path does not exist: %s", path)
                sys.exit(1)

        return LogArgs(
            paths=paths,
            pattern=parsed_args.pattern,
            options=configuration.to_options(**ArgumentParser._option_overrides(parsed_args)),
            read_contents=not parsed_args.no_contents,
        )

    @staticmethod
    def _option_overrides(parsed_args: argparse.Namespace) -> dict[str, Any]:
        overrides: dict[str, Any] = {
            "action": ArgumentParser.resolve_action(parsed_args.action),
        }
        if parsed_args.prefix is not None:
            overrides["prefix"] = escape(parsed_args.prefix)
        if parsed_args.suffix is not None:
            overrides["suffix"] = escape(parsed_args.suffix)
        if parsed_args.verbose:
            overrides["verbose"] = True
        if parsed_args.full:
            overrides["minimal"] = False
        if parsed_args.count_only:
            overrides["show_files"] = False
        if parsed_args.no_loader or parsed_args.quiet:
            overrides["show_loader"] = False
        return overrides

    @staticmethod
    def resolve_action(action: str) -> str:
        """Map known action names to glyphs; other text is shown literally."""

        return ACTION_ALIASES.get(action.strip().lower(), escape(action))
