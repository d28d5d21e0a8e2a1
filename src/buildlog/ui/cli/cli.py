"""Command line interface for buildlog."""

import sys
from typing import final

from buildlog.features.sources import iter_file_records
from buildlog.features.transform import LoggingTransform, drain
from buildlog.platform.logging import logger
from buildlog.ui.cli.args import ArgumentParser, LogArgs


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> int:
        """Process command line arguments and run the logging stream.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Number of files that passed through the stream.
        """
        try:
            args: LogArgs = ArgumentParser.process_args(args_list)
            records = iter_file_records(
                args.paths,
                pattern=args.pattern,
                read_contents=args.read_contents,
            )
            transform = LoggingTransform(args.options)
            try:
                passed = drain(records, transform)
            finally:
                transform.stop_loader()
            return len(passed)

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Errors exit through
        ``sys.exit(...)`` inside command processing.
    """
    _ = CommandProcessor.process_command()
    return 0
