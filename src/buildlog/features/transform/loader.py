"""Transient progress indicator shown while a stream is running."""

from __future__ import annotations

from typing import Protocol, final, runtime_checkable

from rich.console import Console
from rich.status import Status

from buildlog.platform.logging import BuildLogRichHandler, logger


@runtime_checkable
class Loader(Protocol):
    """Anything that can be started when a run begins and stopped at its end."""

    def start(self) -> None:
        ...

    def stop(self) -> None:
        ...


def _logger_console() -> Console | None:
    for handler in logger.handlers:
        if isinstance(handler, BuildLogRichHandler):
            return handler.console
    return None


@final
class SpinnerLoader:
    """Bouncing-bar spinner rendered on the logger's console.

    Rich clears the spinner line on stop, so nothing is left behind in the
    report output.
    """

    def __init__(
        self,
        console: Console | None = None,
        spinner: str = "bouncingBar",
        style: str = "green",
    ) -> None:
        self._status = Status(
            "",
            console=console or _logger_console(),
            spinner=spinner,
            spinner_style=style,
        )

    def start(self) -> None:
        self._status.start()

    def stop(self) -> None:
        self._status.stop()


__all__ = ["Loader", "SpinnerLoader"]
