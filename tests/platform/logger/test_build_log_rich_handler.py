"""Tests for the Rich console handler and plain-text file formatter."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from buildlog.platform.logging import BuildLogRichHandler, PlainTextFormatter, setup_logger


def _make_handler() -> tuple[BuildLogRichHandler, StringIO]:
    """Create a handler instance with an in-memory console."""

    buffer = StringIO()
    console = Console(file=buffer, force_terminal=False, width=120)
    return BuildLogRichHandler(console=console), buffer


def _build_record(msg: str, level: int = logging.INFO, **extras: Any) -> logging.LogRecord:
    record = logging.LogRecord(
        name="buildlog",
        level=level,
        pathname="test",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_message_parses_markup() -> None:
    handler, _ = _make_handler()

    rendered = handler.render_message(_build_record(""), "├── [green]1[/green] => a.js")

    assert isinstance(rendered, Text)
    assert rendered.plain == "├── 1 => a.js"


def test_render_message_keeps_unbalanced_markup_literal() -> None:
    handler, _ = _make_handler()

    rendered = handler.render_message(_build_record(""), "closing [/green] without opening")

    assert rendered.plain == "closing [/green] without opening"


def test_emitted_line_has_bracketed_time_and_no_level() -> None:
    handler, buffer = _make_handler()

    handler.emit(_build_record("          ┌── log"))

    output = buffer.getvalue()
    assert "┌── log" in output
    assert output.startswith("[")
    assert "INFO" not in output


def test_plain_text_formatter_strips_markup() -> None:
    formatter = PlainTextFormatter("%(levelname)s %(message)s")
    record = _build_record("[green]3 items[/green]")

    assert formatter.format(record) == "INFO 3 items"


def test_setup_logger_attaches_rotating_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "run.log"
    console = Console(file=StringIO())

    logger = setup_logger(log_file=log_file, console_level=logging.WARNING, console=console)
    try:
        logger.info("[blue]written[/blue]")
        for handler in logger.handlers:
            handler.flush()

        assert log_file.exists()
        assert "written" in log_file.read_text(encoding="utf-8")
        assert "[blue]" not in log_file.read_text(encoding="utf-8")
        console_handlers = [h for h in logger.handlers if isinstance(h, BuildLogRichHandler)]
        assert len(console_handlers) == 1
        assert console_handlers[0].level == logging.WARNING
    finally:
        _ = setup_logger()
