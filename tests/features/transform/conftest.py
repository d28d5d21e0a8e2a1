"""Shared fixtures for logging transform tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from rich.text import Text

from buildlog.features.transform import LoggingTransform, LoggerOptions


class RecordingSink:
    """Collect emitted report lines, exposing both markup and plain text."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def __call__(self, line: str) -> None:
        self.lines.append(line)

    @property
    def plain(self) -> list[str]:
        return [Text.from_markup(line).plain for line in self.lines]


@pytest.fixture
def sink() -> RecordingSink:
    """Provide an in-memory line sink."""

    return RecordingSink()


@pytest.fixture
def make_transform(sink: RecordingSink) -> Callable[..., LoggingTransform]:
    """Build transforms wired to the recording sink with the loader disabled."""

    def _make(options: LoggerOptions | None = None, **overrides: object) -> LoggingTransform:
        overrides.setdefault("show_loader", False)
        overrides.setdefault("cwd", "/work")
        return LoggingTransform(options, emit=sink, **overrides)

    return _make
