"""src/buildlog/features/transform/logging_transform.py
What: Pass-through stream stage that reports every file it sees.
Why: Give build pipelines an aligned per-run file report without touching the files.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import replace
from typing import Any, TypeVar, final

from rich.markup import escape

from buildlog.platform.logging import logger
from buildlog.shared.formatting import (
    digits,
    format_size,
    format_stat,
    pluralize,
    relative_path,
    tildify,
)
from buildlog.shared.records import LineRecord

from .loader import Loader, SpinnerLoader
from .options import (
    CLEAN_ACTION,
    EDIT_ACTION,
    FOOTER_GLYPH,
    HEADER_GLYPH,
    LOG_SPACER,
    LoggerOptions,
)

T = TypeVar("T")

COUNT_NOUN = "item"


def _prop(value: str) -> str:
    return f"[magenta]{escape(value)}[/magenta]"


@final
class LoggingTransform:
    """Observe file records, queue a report line for each, and print on completion.

    The transform never alters, drops or reorders records: ``on_item`` hands
    back exactly the object it received. All output happens in
    ``on_complete``, which is expected to run once per stream.
    """

    options: LoggerOptions

    def __init__(
        self,
        options: LoggerOptions | None = None,
        *,
        loader: Loader | None = None,
        emit: Callable[[str], None] | None = None,
        cwd: str | os.PathLike[str] | None = None,
        **overrides: Any,
    ) -> None:
        """Create a transform for a single run.

        Args:
            options: Base options. Defaults apply when omitted.
            loader: Progress indicator to use when ``show_loader`` is set.
                A rich spinner is created when none is given.
            emit: Line sink. Defaults to ``logger.info`` on the package logger.
            cwd: Directory that relative paths are computed against.
            **overrides: Individual ``LoggerOptions`` fields to override.
        """
        base = options or LoggerOptions()
        if overrides:
            base = replace(base, **overrides)
        self.options = base.resolved()
        self._emit = emit or self._log_line
        self._cwd = os.fspath(cwd) if cwd is not None else os.getcwd()
        self._queue: list[LineRecord] = []
        self._count = 0
        self._loader: Loader | None = None

        if self.options.show_loader:
            self._loader = loader or SpinnerLoader()
            self._loader.start()

    @property
    def count(self) -> int:
        """Number of records observed so far."""
        return self._count

    @property
    def queue(self) -> tuple[LineRecord, ...]:
        """Queued report lines in arrival order."""
        return tuple(self._queue)

    def on_item(self, record: T) -> T:
        """Record ``record`` for the report and pass it through unchanged."""

        if self.options.show_files:
            self._queue.append(self._build_line(record))
        self._count += 1
        return record

    def on_complete(self) -> None:
        """Stop the loader and print the queued report."""

        self.stop_loader()

        prefix = self.options.prefix
        suffix = self.options.suffix
        width = digits(len(self._queue))

        self._emit(f"{LOG_SPACER}{HEADER_GLYPH} log")
        for index, line in enumerate(self._queue, start=1):
            output = self._apply_modifier(line)
            padding = " " * (width - digits(index))
            self._emit(f"{prefix} [green]{index}[/green]{padding} {output} {suffix}")

        self._emit(
            f"{LOG_SPACER}{FOOTER_GLYPH} "
            f"[green]{self._count} {pluralize(COUNT_NOUN, self._count)}[/green]"
        )

    def stop_loader(self) -> None:
        """Stop the progress indicator if it is still running.

        Safe to call more than once; hosts call it when a stream fails before
        ``on_complete`` is reached.
        """
        if self._loader is not None:
            self._loader.stop()
            self._loader = None

    def _build_line(self, record: object) -> LineRecord:
        path: str | None = getattr(record, "path", None)
        relative = relative_path(path, self._cwd)
        rendered = _prop(relative) if self.options.minimal else self._detail_block(record)

        contents = getattr(record, "contents", None)
        size = len(contents) if contents is not None else 0
        action = self.options.action

        return LineRecord(
            output=f"=> {rendered} [blue]{format_size(size)}[/blue] {action}",
            absolute_path=rendered,
            relative_path=relative,
            size=size,
            action=action,
            source=record,
        )

    def _detail_block(self, record: object) -> str:
        lines: list[str] = []
        for label in ("cwd", "base", "path"):
            value = getattr(record, label, None)
            if value:
                lines.append(f"{label + ':':<7}{_prop(tildify(str(value)))}")

        stat = getattr(record, "stat", None)
        if self.options.verbose and stat is not None:
            lines.append(f"{'stat:':<7}{_prop(format_stat(stat))}")

        return "\n" + "\n".join(lines) + "\n"

    def _apply_modifier(self, line: LineRecord) -> str:
        modifier = self.options.modifier
        if modifier is None:
            return line.output

        result = modifier(line)
        if result is None:
            return line.output
        if isinstance(result, LineRecord):
            return result.output
        return str(result)

    @staticmethod
    def _log_line(line: str) -> None:
        logger.info(line)


def log_files(options: LoggerOptions | None = None, **kwargs: Any) -> LoggingTransform:
    """Build a logging transform; keyword arguments override ``options``."""

    return LoggingTransform(options, **kwargs)


def edit(options: LoggerOptions | None = None, **kwargs: Any) -> LoggingTransform:
    """Logging transform labelling every file as edited."""

    kwargs.setdefault("action", EDIT_ACTION)
    return LoggingTransform(options, **kwargs)


def clean(options: LoggerOptions | None = None, **kwargs: Any) -> LoggingTransform:
    """Logging transform labelling every file as deleted."""

    kwargs.setdefault("action", CLEAN_ACTION)
    return LoggingTransform(options, **kwargs)


__all__ = ["COUNT_NOUN", "LoggingTransform", "clean", "edit", "log_files"]
