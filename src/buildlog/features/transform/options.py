"""src/buildlog/features/transform/options.py
What: Immutable configuration for a logging transform instance.
Why: Resolve defaults and the verbose override once, before a run starts.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Final, final

from buildlog.shared.records import LineModifier

LOG_SPACER: Final[str] = " " * 10
DEFAULT_PREFIX: Final[str] = LOG_SPACER + "├──"
HEADER_GLYPH: Final[str] = "┌──"
FOOTER_GLYPH: Final[str] = "└──"
VERBOSE_FLAG: Final[str] = "--verbose"

EDIT_ACTION: Final[str] = "[yellow]✎[/yellow]"
CLEAN_ACTION: Final[str] = "[red]🗑[/red]"


@final
@dataclass(slots=True, frozen=True)
class LoggerOptions:
    """Options recognised by :class:`LoggingTransform`.

    ``prefix``, ``suffix`` and ``action`` may carry Rich markup.
    """

    prefix: str = DEFAULT_PREFIX
    suffix: str = ""
    action: str = ""
    show_loader: bool = True
    minimal: bool = True
    show_files: bool = True
    verbose: bool = False
    modifier: LineModifier | None = None

    def resolved(self) -> LoggerOptions:
        """Return options with ``verbose`` forcing the detailed block layout."""

        if self.verbose and self.minimal:
            return replace(self, minimal=False)
        return self


def verbose_requested(argv: Sequence[str] | None = None) -> bool:
    """Whether ``--verbose`` appears in ``argv`` (``sys.argv[1:]`` when omitted)."""

    arguments = sys.argv[1:] if argv is None else argv
    return VERBOSE_FLAG in arguments


__all__ = [
    "CLEAN_ACTION",
    "DEFAULT_PREFIX",
    "EDIT_ACTION",
    "FOOTER_GLYPH",
    "HEADER_GLYPH",
    "LOG_SPACER",
    "LoggerOptions",
    "VERBOSE_FLAG",
    "verbose_requested",
]
