"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final

from buildlog.features.transform.options import LoggerOptions


@final
@dataclass(slots=True)
class LogArgs:
    """Command line arguments for a logging run."""

    paths: list[Path]
    pattern: str
    options: LoggerOptions
    read_contents: bool


__all__ = ["LogArgs"]
