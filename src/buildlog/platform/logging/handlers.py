"""Rich-backed logging handlers for console and file output."""

import logging
from typing import Any, ClassVar, override

from rich.errors import MarkupError
from rich.logging import RichHandler
from rich.text import Text


class BuildLogRichHandler(RichHandler):
    """Rich handler that renders pipeline report lines like a task runner log.

    Every line gets a bracketed ``[HH:MM:SS]`` timestamp and no level or
    source column, so queued report lines stay aligned with each other.
    """

    _TIME_FORMAT: ClassVar[str] = "[%X]"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with report-friendly settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = True
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["log_time_format"] = self._TIME_FORMAT
        kwargs["omit_repeated_times"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        super().__init__(*args, **kwargs)

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> Text:
        """Render markup, falling back to literal text when it does not parse."""

        try:
            text = Text.from_markup(message)
        except MarkupError:
            text = Text(message)
        if record.levelno >= logging.ERROR:
            text.stylize("bold red")
        elif record.levelno >= logging.WARNING:
            text.stylize("yellow")
        return text


class PlainTextFormatter(logging.Formatter):
    """Formatter that strips Rich markup so log files stay readable."""

    @override
    def formatMessage(self, record: logging.LogRecord) -> str:
        message = record.message
        try:
            record.message = Text.from_markup(message).plain
        except MarkupError:
            pass
        try:
            return super().formatMessage(record)
        finally:
            record.message = message


__all__ = ["BuildLogRichHandler", "PlainTextFormatter"]
